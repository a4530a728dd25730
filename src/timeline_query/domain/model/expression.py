"""Compiled query expression tree.

Nodes are immutable and hashable. The tree is what the query execution
collaborator consumes; see infrastructure.serializers for text/JSON forms.

Empty And = matches everything. Empty Or = matches nothing.
"""

from __future__ import annotations

from dataclasses import dataclass

from timeline_query.domain.model.query_match import QueryOperator, validate_field


@dataclass(frozen=True, slots=True)
class Match:
    """Leaf predicate: field equals value (IS) or field is present (EXISTS)."""

    field: str
    value: str | int | float
    operator: QueryOperator = QueryOperator.IS

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        validate_field(self.field)


@dataclass(frozen=True, slots=True)
class RawQuery:
    """Opaque free-text query carried verbatim to the executor."""

    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.text.strip():
            raise ValueError("text must not be blank")


@dataclass(frozen=True, slots=True)
class Not:
    """Logical negation."""

    operand: Expression


@dataclass(frozen=True, slots=True)
class And:
    """Logical conjunction. Empty = always true."""

    operands: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class Or:
    """Logical disjunction. Empty = always false."""

    operands: tuple[Expression, ...]


Expression = Match | RawQuery | Not | And | Or

MATCH_NOTHING = Or(())


def conjunction(operands: tuple[Expression, ...]) -> Expression:
    """AND of operands, collapsing the single-operand case."""
    if len(operands) == 1:
        return operands[0]
    return And(operands)


def disjunction(operands: tuple[Expression, ...]) -> Expression:
    """OR of operands, collapsing the single-operand case."""
    if len(operands) == 1:
        return operands[0]
    return Or(operands)


def is_match_nothing(expression: Expression) -> bool:
    """True for the zero-term expression."""
    return isinstance(expression, Or) and not expression.operands


def term_count(expression: Expression) -> int:
    """Number of leaf terms (Match / RawQuery) in the tree."""
    match expression:
        case Match() | RawQuery():
            return 1
        case Not():
            return term_count(expression.operand)
        case And() | Or():
            return sum(term_count(op) for op in expression.operands)
