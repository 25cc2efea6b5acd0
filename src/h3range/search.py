"""
Radius search over compact H3 indexes.

Pipeline for a query (lat, lon, radius):
1. Pick the coarsest acceptable resolution for the radius
2. Find the H3 cell containing the point at that resolution
3. Walk enough k-rings around it to cover the radius
4. Project every ring cell to the range of its resolution 15 descendants
5. Merge the ranges and wrap them as a predicate

The result is a superset of the true circle; run an exact distance check
downstream if precision matters.
"""
import logging
import time
from typing import Optional, Sequence

from src.h3range import config
from src.h3range import metrics
from src.h3range.compact import to_compact
from src.h3range.errors import ConfigurationError
from src.h3range.grid import FINEST_RESOLUTION, GridBackend, H3Grid, cell_to_int
from src.h3range.models import RadiusQuery
from src.h3range.predicate import RangePredicate, build_predicate
from src.h3range.ranges import Range, project_range
from src.h3range.resolution import EDGE_LENGTHS, EdgeLength
from src.h3range.resolution import select_resolution as _select_resolution
from src.h3range.ring import enumerate_ring

logger = logging.getLogger(__name__)


class RadiusSearch:
    """
    Stateless radius-search service.

    All configuration is fixed at construction, so one instance can be
    shared freely between threads.
    """

    def __init__(
        self,
        edge_lengths: Sequence[EdgeLength] = EDGE_LENGTHS,
        grid: Optional[GridBackend] = None,
        resolution_safety_factor: Optional[float] = None,
        ring_safety_factor: Optional[float] = None,
        index_resolution: Optional[int] = None,
    ):
        if resolution_safety_factor is None:
            resolution_safety_factor = config.RESOLUTION_SAFETY_FACTOR
        if ring_safety_factor is None:
            ring_safety_factor = config.RING_SAFETY_FACTOR
        if index_resolution is None:
            index_resolution = config.INDEX_RESOLUTION

        if not edge_lengths:
            raise ConfigurationError("Edge length table is empty")
        if resolution_safety_factor <= 0:
            raise ConfigurationError(
                f"Resolution safety factor must be positive, got {resolution_safety_factor}"
            )
        if ring_safety_factor <= 0:
            raise ConfigurationError(
                f"Ring safety factor must be positive, got {ring_safety_factor}"
            )
        if not 0 <= index_resolution <= FINEST_RESOLUTION:
            raise ConfigurationError(
                f"Index resolution must be between 0 and {FINEST_RESOLUTION}, got {index_resolution}"
            )

        self.edge_lengths = tuple(edge_lengths)
        self.grid = grid or H3Grid()
        self.resolution_safety_factor = resolution_safety_factor
        self.ring_safety_factor = ring_safety_factor
        self.index_resolution = index_resolution

    def select_resolution(self, radius_m: float) -> int:
        return _select_resolution(radius_m, self.edge_lengths, self.resolution_safety_factor)

    def compact_index_of(self, lat: float, lon: float, resolution: Optional[int] = None) -> int:
        """Compact index to store for an entity located at (lat, lon)."""
        if resolution is None:
            resolution = self.index_resolution
        return to_compact(self.grid.cell_of(lat, lon, resolution))

    def _ring(self, lat: float, lon: float, radius_m: float) -> tuple[set[str], int]:
        resolution = self.select_resolution(radius_m)
        center = self.grid.cell_of(lat, lon, resolution)
        cells = enumerate_ring(center, radius_m, self.grid, self.ring_safety_factor)
        return cells, resolution

    def ring_by_radius(self, lat: float, lon: float, radius_m: float) -> tuple[list[int], int]:
        """
        Cells covering the search circle.

        Returns:
            Tuple of (ring cells as 64-bit integers, selected resolution)
        """
        cells, resolution = self._ring(lat, lon, radius_m)
        return [cell_to_int(cell) for cell in cells], resolution

    def _projected_ranges(self, lat: float, lon: float, radius_m: float) -> list[Range]:
        cells, resolution = self._ring(lat, lon, radius_m)

        metrics.selected_resolution_total.labels(resolution=str(resolution)).inc()
        metrics.ring_cells_per_query.observe(len(cells))
        logger.debug(
            "Radius query (%.6f, %.6f, %.1fm): resolution %d, %d cells",
            lat, lon, radius_m, resolution, len(cells)
        )
        return [project_range(cell, resolution=self.grid.resolution(cell)) for cell in cells]

    def ranges_for_radius(self, lat: float, lon: float, radius_m: float) -> list[Range]:
        """Merged compact index ranges covering the search circle."""
        return list(self.build_radius_predicate(lat, lon, radius_m))

    def build_radius_predicate(self, lat: float, lon: float, radius_m: float) -> RangePredicate:
        """
        Predicate matching entities within (roughly) radius_m of a point.

        Raises:
            ConfigurationError: if the edge length table cannot resolve the radius
            ExternalLookupFailure: if h3 rejects the coordinates
        """
        start_time = time.time()
        try:
            predicate = build_predicate(self._projected_ranges(lat, lon, radius_m))
        except Exception:
            metrics.radius_queries_total.labels(status="error").inc()
            raise

        metrics.radius_queries_total.labels(status="success").inc()
        metrics.ranges_per_query.observe(len(predicate))
        metrics.radius_query_duration_seconds.observe(time.time() - start_time)
        logger.debug("Radius query merged into %d ranges", len(predicate))
        return predicate

    def search(self, query: RadiusQuery) -> RangePredicate:
        """Build a predicate from a validated query model."""
        return self.build_radius_predicate(query.lat, query.lon, query.radius_m)


_default_search = None


def get_radius_search() -> RadiusSearch:
    """Shared service built from the environment configuration."""
    global _default_search
    if _default_search is None:
        _default_search = RadiusSearch()
    return _default_search


def compact_index_of(lat: float, lon: float, resolution: Optional[int] = None) -> int:
    return get_radius_search().compact_index_of(lat, lon, resolution)


def build_radius_predicate(lat: float, lon: float, radius_m: float) -> RangePredicate:
    return get_radius_search().build_radius_predicate(lat, lon, radius_m)


def select_resolution(radius_m: float) -> int:
    return get_radius_search().select_resolution(radius_m)
