"""Expression -> Filter.

Reference executor for compiled expressions over in-memory rows.
Free-text RawQuery nodes are evaluated only through a caller-supplied
raw_query factory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from timeline_query.domain.exceptions import InvalidExpressionError
from timeline_query.domain.model.expression import And, Match, Not, Or, RawQuery
from timeline_query.domain.model.query_match import QueryOperator
from timeline_query.infrastructure.filters.composite import all_of, any_of, negate
from timeline_query.infrastructure.filters.match import field_exists, match_field

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from timeline_query.domain.model.expression import Expression
    from timeline_query.domain.model.window import Row
    from timeline_query.infrastructure.filters.types import Filter


def to_filter(
    expression: Expression,
    raw_query: Callable[[str], Filter] | None = None,
) -> Filter:
    """Build a row filter equivalent to the expression.

    Args:
        expression: Compiled expression.
        raw_query: Factory for free-text nodes. None = free text is rejected.

    Returns:
        Filter implementing the expression. The empty Or matches nothing.

    Raises:
        InvalidExpressionError: If the expression holds free text and no
            raw_query factory is given
    """
    match expression:
        case Match(operator=QueryOperator.EXISTS):
            return field_exists(expression.field)
        case Match():
            return match_field(expression.field, expression.value)
        case Not():
            return negate(to_filter(expression.operand, raw_query))
        case And():
            return all_of(*(to_filter(op, raw_query) for op in expression.operands))
        case Or():
            return any_of(*(to_filter(op, raw_query) for op in expression.operands))
        case RawQuery():
            if raw_query is None:
                raise InvalidExpressionError(
                    f"free-text query needs a raw_query factory: {expression.text!r}"
                )
            return raw_query(expression.text)


def filter_rows(
    rows: Iterable[Row],
    expression: Expression,
    raw_query: Callable[[str], Filter] | None = None,
) -> tuple[Row, ...]:
    """Rows matching the expression, in original order.

    Raises:
        InvalidExpressionError: If the expression holds free text and no
            raw_query factory is given
    """
    flt = to_filter(expression, raw_query)
    return tuple(row for row in rows if flt(row))
