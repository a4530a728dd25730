"""Field lookup over result rows.

Rows are mappings. A dotted field name ("host.name") is resolved first as
a flat key, then by walking nested mappings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final


class _Missing:
    """Sentinel type for absent fields (None is a legitimate field value)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def get_field(row: Mapping[str, Any], field: str) -> Any:
    """Value of field in row, or MISSING.

    Args:
        row: Result row
        field: Field name, dotted for nested fields

    Returns:
        Field value, MISSING if any path segment is absent
    """
    if field in row:
        return row[field]

    current: Any = row
    for segment in field.split("."):
        if not isinstance(current, Mapping) or segment not in current:
            return MISSING
        current = current[segment]
    return current


def field_values(row: Mapping[str, Any], field: str) -> tuple[Any, ...]:
    """Field value flattened to a tuple (lists become their elements)."""
    value = get_field(row, field)
    if value is MISSING or value is None:
        return ()
    if isinstance(value, list | tuple):
        return tuple(v for v in value if v is not None)
    return (value,)
