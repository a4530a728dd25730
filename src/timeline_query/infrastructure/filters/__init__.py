"""Infrastructure layer: stateless row filters.

Filters are pure functions: Filter = Callable[[Row], bool]
True = include row, False = exclude row.

Usage:
    from timeline_query.infrastructure.filters import to_filter

    # Compiled expression
    flt = to_filter(compile_providers(registry))
    visible = [row for row in rows if flt(row)]

    # Composed by hand
    flt = all_of(match_field("host.name", "web-1"), negate(field_exists("error")))
"""

from timeline_query.infrastructure.filters.composite import all_of, any_of, negate
from timeline_query.infrastructure.filters.expression import filter_rows, to_filter
from timeline_query.infrastructure.filters.fields import MISSING, field_values, get_field
from timeline_query.infrastructure.filters.match import field_exists, match_field
from timeline_query.infrastructure.filters.types import Filter

__all__ = [
    "MISSING",
    "Filter",
    "all_of",
    "any_of",
    "field_exists",
    "field_values",
    "filter_rows",
    "get_field",
    "match_field",
    "negate",
    "to_filter",
]
