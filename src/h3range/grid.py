"""
Spatial indexing using H3 hexagonal grid system.

Thin adapter over the h3 library. Everything the range search needs from the
grid (cell lookup, k-rings, resolution, approximate cell radius) goes through
here, so another hierarchical hex grid can be plugged in by implementing
GridBackend.
"""
from typing import Protocol, Union

import h3

# Finest resolution H3 supports; ranges are always projected down to it
FINEST_RESOLUTION = 15

# Farthest any point can be from another on the globe (half the equator)
EARTH_HALF_CIRCUMFERENCE_M = 20_037_509

Cell = Union[str, int]


def latlon_to_cell(lat: float, lon: float, resolution: int) -> str:
    """
    Convert lat/lon to H3 hexagon cell ID.

    Args:
        lat: Latitude
        lon: Longitude
        resolution: H3 resolution (0-15)

    Returns:
        H3 cell ID (e.g., "8a2a1072b59ffff")
    """
    return h3.latlng_to_cell(lat, lon, resolution)


def get_neighbor_cells(cell_id: str, k: int = 1) -> list[str]:
    """
    Get all hexagons within k hops of the given cell.

    Args:
        cell_id: H3 cell ID
        k: Number of hops (1 = immediate neighbors, 2 = 2-ring, etc.)

    Returns:
        List of H3 cell IDs including the center cell

    Examples:
        k=0: 1 cell (just the center)
        k=1: 7 cells (center + 6 neighbors)
        k=2: 19 cells (center + 2-ring)
    """
    return list(h3.grid_disk(cell_id, k))


def cell_to_int(cell: Cell) -> int:
    """Return the 64-bit integer form of a cell given as hex string or int."""
    if isinstance(cell, int):
        return cell
    return h3.str_to_int(cell)


def cell_to_str(cell: Cell) -> str:
    if isinstance(cell, str):
        return cell
    return h3.int_to_str(cell)


def cell_resolution(cell: Cell) -> int:
    return h3.get_resolution(cell_to_str(cell))


def cell_radius_km(cell: Cell) -> float:
    """
    Approximate radius of a cell in kilometers.

    Distance from the cell center to its first boundary vertex, i.e. the
    circumradius of the hexagon.
    """
    cell_id = cell_to_str(cell)
    center = h3.cell_to_latlng(cell_id)
    boundary = h3.cell_to_boundary(cell_id)
    return h3.great_circle_distance(center, boundary[0], unit="km")


class GridBackend(Protocol):
    """Capabilities the range search consumes from a hierarchical hex grid."""

    def cell_of(self, lat: float, lon: float, resolution: int) -> str: ...

    def k_ring(self, cell: str, k: int) -> set[str]: ...

    def resolution(self, cell: str) -> int: ...

    def radius_km(self, cell: str) -> float: ...


class H3Grid:
    """GridBackend backed by the h3 library."""

    def cell_of(self, lat: float, lon: float, resolution: int) -> str:
        return latlon_to_cell(lat, lon, resolution)

    def k_ring(self, cell: str, k: int) -> set[str]:
        return set(get_neighbor_cells(cell, k))

    def resolution(self, cell: str) -> int:
        return cell_resolution(cell)

    def radius_km(self, cell: str) -> float:
        return cell_radius_km(cell)
