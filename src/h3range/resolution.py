"""
Resolution selection for radius searches.

A coarse resolution means few rings but large cells (many false positives);
a fine resolution means small cells but many rings to walk. We pick the
coarsest resolution whose hexagon edge is still comfortably larger than the
search radius.
"""
import logging
import math
from typing import NamedTuple, Optional, Sequence

from src.h3range import config
from src.h3range.errors import ConfigurationError

logger = logging.getLogger(__name__)


class EdgeLength(NamedTuple):
    """Approximate hexagon edge length (meters) at a resolution."""
    edge_length_m: float
    resolution: int


# Ordered finest -> coarsest. The infinite sentinel catches any radius
# larger than a resolution 0 hexagon.
# 10 = ~66m edge
# 8 = ~461m edge
# 5 = ~8.5km edge
EDGE_LENGTHS: tuple[EdgeLength, ...] = (
    EdgeLength(66, 10),
    EdgeLength(174, 9),
    EdgeLength(461, 8),
    EdgeLength(1221, 7),
    EdgeLength(3230, 6),
    EdgeLength(8544, 5),
    EdgeLength(22606, 4),
    EdgeLength(59811, 3),
    EdgeLength(158245, 2),
    EdgeLength(418676, 1),
    EdgeLength(1107713, 0),
    EdgeLength(math.inf, 0),
)


def select_resolution(
    radius_m: float,
    table: Sequence[EdgeLength] = EDGE_LENGTHS,
    safety_factor: Optional[float] = None,
) -> int:
    """
    Pick the coarsest acceptable resolution for a search radius.

    Walks the table from finest to coarsest and returns the first resolution
    whose edge_length * safety_factor exceeds the radius.

    Args:
        radius_m: Search radius in meters (non-negative)
        table: Edge-length table ordered finest to coarsest
        safety_factor: Edge multiplier, defaults to config.RESOLUTION_SAFETY_FACTOR

    Returns:
        H3 resolution (0-15)

    Raises:
        ConfigurationError: if the table is empty or no entry resolves the radius
    """
    if safety_factor is None:
        safety_factor = config.RESOLUTION_SAFETY_FACTOR
    if not table:
        raise ConfigurationError("Edge length table is empty")

    for entry in table:
        if entry.edge_length_m * safety_factor > radius_m:
            logger.debug("Radius %.1fm -> resolution %d", radius_m, entry.resolution)
            return entry.resolution

    raise ConfigurationError(
        f"No resolution in edge length table covers radius {radius_m}m "
        f"(largest edge {table[-1].edge_length_m}m, factor {safety_factor})"
    )
