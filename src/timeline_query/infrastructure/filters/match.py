"""Field matchers.

Filter rows by a single field. Multi-valued fields (lists) match when any
element matches. Values are compared as strings so that 80 matches "80".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from timeline_query.infrastructure.filters.fields import field_values

if TYPE_CHECKING:
    from timeline_query.domain.model.window import Row
    from timeline_query.infrastructure.filters.types import Filter


def match_field(field: str, value: str | int | float) -> Filter:
    """Create filter that includes rows where field equals value.

    Args:
        field: Field name, dotted for nested fields.
        value: Expected value.

    Returns:
        Filter that returns True if any value of field equals value.
        Returns False for rows without the field.
    """
    expected = _normalize(value)

    def _filter(row: Row) -> bool:
        return any(_normalize(v) == expected for v in field_values(row, field))

    return _filter


def field_exists(field: str) -> Filter:
    """Create filter that includes rows having a non-null field.

    Args:
        field: Field name, dotted for nested fields.

    Returns:
        Filter that returns True if field is present and not null/empty.
    """

    def _filter(row: Row) -> bool:
        return bool(field_values(row, field))

    return _filter


def _normalize(value: object) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
