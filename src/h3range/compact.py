"""
Compact 52-bit representation of H3 cells.

An H3 index carries reserved, mode and resolution fields in its top 12 bits.
Masking them off leaves the base cell number followed by fifteen 3-bit child
digits, so cells compare as plain integers and nested cells occupy contiguous
numeric bands. The result also fits a signed BIGINT column.
"""
from typing import Optional

from src.h3range import config
from src.h3range.grid import Cell, cell_to_int, latlon_to_cell

COMPACT_BITS = 52
COMPACT_MASK = (1 << COMPACT_BITS) - 1  # 0xFFFFFFFFFFFFF


def to_compact(cell: Cell) -> int:
    """Strip the mode/resolution prefix from a cell, keeping base cell and digits."""
    return cell_to_int(cell) & COMPACT_MASK


def compact_index_of(lat: float, lon: float, resolution: Optional[int] = None) -> int:
    """
    Compact index of the cell containing a point.

    Use this when storing an entity's location. The same masking is applied
    to query ranges, so the stored value and the ranges stay comparable.

    Args:
        lat: Latitude
        lon: Longitude
        resolution: H3 resolution, defaults to config.INDEX_RESOLUTION

    Returns:
        52-bit compact index
    """
    if resolution is None:
        resolution = config.INDEX_RESOLUTION
    return to_compact(latlon_to_cell(lat, lon, resolution))
