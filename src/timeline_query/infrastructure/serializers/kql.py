"""KQL serializer: Expression -> query text.

    Match IS        field : "value"
    Match EXISTS    field : *
    Not             NOT x
    And             a and b
    Or              (a) or (b)
    RawQuery        (text)
    empty Or        "" (nothing to query)
    empty And       "" (no constraint)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from timeline_query.domain.model.expression import And, Match, Not, Or, RawQuery
from timeline_query.domain.model.query_match import QueryOperator

if TYPE_CHECKING:
    from timeline_query.domain.model.expression import Expression


def to_kql(expression: Expression) -> str:
    """Serialize an expression to KQL text."""
    match expression:
        case Match(operator=QueryOperator.EXISTS):
            return f"{expression.field} : *"
        case Match():
            return f"{expression.field} : {quote(expression.value)}"
        case Not():
            inner = to_kql(expression.operand)
            if isinstance(expression.operand, And | Or):
                inner = f"({inner})"
            return f"NOT {inner}"
        case And():
            return " and ".join(_and_operand(op) for op in expression.operands)
        case Or():
            return " or ".join(_or_operand(op) for op in expression.operands)
        case RawQuery():
            return f"({expression.text})"


def quote(value: str | int | float) -> str:
    """Quote a value: numbers bare, strings in escaped double quotes."""
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _and_operand(expression: Expression) -> str:
    text = to_kql(expression)
    if isinstance(expression, And | Or) and len(expression.operands) > 1:
        return f"({text})"
    return text


def _or_operand(expression: Expression) -> str:
    text = to_kql(expression)
    if isinstance(expression, RawQuery):
        return text
    return f"({text})"
