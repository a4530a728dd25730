"""Query match value object: the predicate a provider contributes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Characters that would let a field name change the structure of query text.
FIELD_RESERVED_CHARS = frozenset(" \t\n\r\"'():")


class QueryOperator(Enum):
    """How a provider's field is matched.

    IS: field equals value.
    EXISTS: field is present, value ignored.
    """

    IS = ":"
    EXISTS = ":*"


@dataclass(frozen=True, slots=True)
class QueryMatch:
    """Field/value predicate.

    Attributes:
        field: Event field name, dotted for nested fields (e.g. "host.name")
        value: Value to compare against (ignored for EXISTS)
        display_value: Label shown instead of value. None = show value
        operator: Match operator
    """

    field: str
    value: str | int | float
    display_value: str | None = None
    operator: QueryOperator = QueryOperator.IS

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        validate_field(self.field)
        if isinstance(self.value, bool) or not isinstance(self.value, str | int | float):
            raise TypeError(f"value must be str or number, got {type(self.value).__name__}")

    def __str__(self) -> str:
        """Format as field: "value" (or field: * for EXISTS)."""
        if self.operator is QueryOperator.EXISTS:
            return f"{self.field}: *"
        shown = self.display_value if self.display_value is not None else self.value
        return f'{self.field}: "{shown}"'


def validate_field(field: str) -> None:
    """Check a field name is non-empty and free of query syntax.

    Raises:
        ValueError: If field is empty or contains whitespace, quotes,
            parentheses or ':'
    """
    if not field:
        raise ValueError("field must not be empty")
    reserved = sorted(FIELD_RESERVED_CHARS.intersection(field))
    if reserved:
        raise ValueError(f"field {field!r} contains reserved characters: {reserved!r}")
