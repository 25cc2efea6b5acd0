"""
Radius predicates over stored compact indexes.

A predicate is kept as plain data (an ordered tuple of ranges) so each
storage backend can translate it into its own native filter. SQLAlchemy is
supported out of the box via RangePredicate.to_clause.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator

from sqlalchemy import false, or_
from sqlalchemy.sql.elements import ColumnElement

from src.h3range.errors import InvariantViolation
from src.h3range.ranges import Range, union_ranges


@dataclass(frozen=True)
class RangePredicate:
    """
    Disjunction of inclusive range-membership tests on a compact index.

    Ranges must be sorted and separated by at least one value, as produced
    by union_ranges; use build_predicate to get there from arbitrary ranges.
    """
    ranges: tuple[Range, ...] = ()

    def __post_init__(self):
        for prev, rng in zip(self.ranges, self.ranges[1:]):
            if rng.lower_bound <= prev.upper_bound + 1:
                raise InvariantViolation(
                    f"Ranges {prev} and {rng} are unsorted, overlapping or touching"
                )

    def __iter__(self) -> Iterator[Range]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)

    def __contains__(self, compact: int) -> bool:
        return self.matches(compact)

    @property
    def is_empty(self) -> bool:
        """An empty predicate matches nothing."""
        return not self.ranges

    def matches(self, compact: int) -> bool:
        """True if the compact index lies in at least one range."""
        return any(compact in rng for rng in self.ranges)

    def to_clause(self, column) -> ColumnElement:
        """
        Translate the predicate into a SQLAlchemy boolean clause.

        Args:
            column: Column (or any SQL expression) holding the compact index

        Returns:
            OR of BETWEEN tests, or FALSE for an empty predicate

        Example:
            session.query(Bike).filter(predicate.to_clause(Bike.h3_compact))
        """
        if self.is_empty:
            return false()
        clauses = [column.between(rng.lower_bound, rng.upper_bound) for rng in self.ranges]
        if len(clauses) == 1:
            return clauses[0]
        return or_(*clauses)


def build_predicate(ranges: Iterable[Range]) -> RangePredicate:
    """Merge ranges and wrap them as a predicate."""
    return RangePredicate(tuple(union_ranges(ranges)))
