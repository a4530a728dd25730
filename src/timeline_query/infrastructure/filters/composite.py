"""Row filter combinators.

These mirror the expression nodes: And, Or, Not. Each combinator is
lazy and stops at the first deciding filter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timeline_query.domain.model.window import Row
    from timeline_query.infrastructure.filters.types import Filter


def all_of(*filters: Filter) -> Filter:
    """Row passes when every filter accepts it.

    With no filters every row passes, like the empty And.
    """

    def _filter(row: Row) -> bool:
        return all(f(row) for f in filters)

    return _filter


def any_of(*filters: Filter) -> Filter:
    """Row passes when some filter accepts it.

    With no filters no row passes, like the empty Or (MATCH_NOTHING).
    """

    def _filter(row: Row) -> bool:
        return any(f(row) for f in filters)

    return _filter


def negate(flt: Filter) -> Filter:
    """Row passes when flt rejects it. Used for excluded providers."""

    def _filter(row: Row) -> bool:
        return not flt(row)

    return _filter
