"""
K-ring enumeration around the search center.
"""
import logging
import math
from typing import Optional

from src.h3range import config
from src.h3range.grid import EARTH_HALF_CIRCUMFERENCE_M, GridBackend, H3Grid

logger = logging.getLogger(__name__)


def max_ring_size(cell_radius_km: float) -> int:
    """
    Largest k worth asking for: a disk this wide already spans the globe.

    Neighboring hexagon centers are sqrt(3) * edge apart, and the edge of a
    hexagon equals its circumradius.
    """
    spacing_m = math.sqrt(3) * cell_radius_km * 1000
    return math.ceil(EARTH_HALF_CIRCUMFERENCE_M / spacing_m) + 1


def ring_size(
    radius_m: float,
    cell_radius_km: float,
    safety_factor: Optional[float] = None,
) -> int:
    """
    Number of hex rings needed to cover a radius.

    k = floor(radius / (cell_radius * safety_factor)) + 1, so k is never 0
    and the center's immediate neighbors are always included. k is capped
    at max_ring_size, so any radius yields a bounded disk.

    Args:
        radius_m: Search radius in meters
        cell_radius_km: Approximate radius of the center cell in kilometers
        safety_factor: Divisor compensating for the hexagon/circle mismatch,
            defaults to config.RING_SAFETY_FACTOR
    """
    if safety_factor is None:
        safety_factor = config.RING_SAFETY_FACTOR
    k = math.floor(radius_m / (cell_radius_km * safety_factor * 1000)) + 1
    return min(k, max_ring_size(cell_radius_km))


def enumerate_ring(
    center: str,
    radius_m: float,
    grid: Optional[GridBackend] = None,
    safety_factor: Optional[float] = None,
) -> set[str]:
    """
    Cells covering a radius around a center cell.

    Grid errors (e.g. invalid cell) propagate unchanged.

    Returns:
        Set of H3 cell IDs, center included
    """
    if grid is None:
        grid = H3Grid()
    k = ring_size(radius_m, grid.radius_km(center), safety_factor)
    cells = grid.k_ring(center, k)
    logger.debug("Ring around %s: k=%d, %d cells", center, k, len(cells))
    return cells
