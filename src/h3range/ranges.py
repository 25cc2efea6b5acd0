"""
Compact-index ranges covering H3 cells, and merging of those ranges.

Within an H3 index every resolution below the cell's own is encoded as the
unused digit 7 (binary 111). A cell's compact value is therefore the largest
compact value of all its descendants, and clearing those trailing digit bits
gives the smallest. That band [lower, upper] holds every descendant at any
finer resolution, down to 15.
"""
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable, Iterator, Optional

from src.h3range.compact import to_compact
from src.h3range.errors import InvariantViolation
from src.h3range.grid import FINEST_RESOLUTION, Cell, cell_resolution

BITS_PER_LEVEL = 3


@dataclass(frozen=True)
class Range:
    """Inclusive interval of compact index values."""
    lower_bound: int
    upper_bound: int

    def __post_init__(self):
        if self.lower_bound < 0:
            raise InvariantViolation(f"Range lower bound {self.lower_bound} is negative")
        if self.lower_bound > self.upper_bound:
            raise InvariantViolation(
                f"Range lower bound {self.lower_bound} exceeds upper bound {self.upper_bound}"
            )

    def __contains__(self, value: int) -> bool:
        return self.lower_bound <= value <= self.upper_bound

    @property
    def size(self) -> int:
        """Number of compact values in the range."""
        return self.upper_bound - self.lower_bound + 1

    def union_with(self, other: "Range") -> "Range":
        """Extend this range with an overlapping or touching range that starts no earlier."""
        return Range(self.lower_bound, max(self.upper_bound, other.upper_bound))


def project_range(
    cell: Cell,
    finest_resolution: int = FINEST_RESOLUTION,
    resolution: Optional[int] = None,
) -> Range:
    """
    Range of compact values spanned by a cell's descendants.

    Args:
        cell: H3 cell (hex string or int)
        finest_resolution: Resolution the descendants are expanded to
        resolution: Resolution of the cell, looked up from h3 when omitted

    Returns:
        Range whose upper bound is the cell's own compact value

    Raises:
        InvariantViolation: if the cell is finer than finest_resolution or the
            lower bound would fall below zero
    """
    if resolution is None:
        resolution = cell_resolution(cell)
    diff_levels = finest_resolution - resolution
    if diff_levels < 0:
        raise InvariantViolation(
            f"Cell {cell} is finer than resolution {finest_resolution}"
        )

    bits = diff_levels * BITS_PER_LEVEL
    range_size = (1 << bits) - 1
    upper_bound = to_compact(cell)
    lower_bound = upper_bound - range_size
    if lower_bound < 0:
        raise InvariantViolation(
            f"Range for cell {cell} underflows: {upper_bound} - {range_size}"
        )
    return Range(lower_bound, upper_bound)


def union_ranges(ranges: Iterable[Range]) -> Iterator[Range]:
    """
    Merge overlapping and touching ranges.

    Ranges are sorted by lower bound, then folded left to right. Two ranges
    merge when the next one starts at most one past the current upper bound,
    so [10, 20] and [21, 30] become [10, 30].

    Yields:
        Disjoint ranges in ascending order, separated by at least one value
    """
    current = None
    for rng in sorted(ranges, key=attrgetter("lower_bound")):
        if current is None:
            current = rng
        elif rng.lower_bound <= current.upper_bound + 1:
            current = current.union_with(rng)
        else:
            yield current
            current = rng

    if current is not None:
        yield current
