"""Query compiler: provider registry -> boolean expression.

    expr = OR_i [ AND( contribute(p_i), contribute(a_i1), ..., contribute(a_ik) ) ]

contribute(x) drops out of its AND when x is disabled, otherwise it is
Match(x) or Not(Match(x)) when x is excluded. A disabled anchor does not
disable its AND-group. Groups with no contributing member are left out of
the OR; with no groups left the result is the empty Or (matches nothing).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from timeline_query.domain.model.enums import KqlMode
from timeline_query.domain.model.expression import (
    MATCH_NOTHING,
    And,
    Match,
    Not,
    Or,
    RawQuery,
    conjunction,
    disjunction,
    is_match_nothing,
    term_count,
)

if TYPE_CHECKING:
    from timeline_query.domain.model.expression import Expression
    from timeline_query.domain.model.provider import Provider
    from timeline_query.domain.model.registry import ProviderRegistry


@dataclass(frozen=True, slots=True)
class CompiledQuery:
    """Expression handed to the query execution collaborator.

    Attributes:
        expression: Boolean expression tree
        provider_expression: Part contributed by the providers alone
        kql_mode: How free text was combined with the providers
    """

    expression: Expression
    provider_expression: Expression
    kql_mode: KqlMode

    @property
    def is_empty(self) -> bool:
        """True when nothing contributes: there is no query to execute."""
        return is_match_nothing(self.expression)

    @property
    def term_count(self) -> int:
        """Number of contributing leaf terms."""
        return term_count(self.expression)


def contribute(provider: Provider) -> Expression | None:
    """Term a single provider adds to its AND. None when disabled."""
    if not provider.enabled:
        return None
    predicate = Match(
        field=provider.query_match.field,
        value=provider.query_match.value,
        operator=provider.query_match.operator,
    )
    return Not(predicate) if provider.excluded else predicate


def compile_group(provider: Provider) -> Expression | None:
    """AND of an anchor and its members. None when nothing contributes."""
    terms = [contribute(provider)]
    terms.extend(contribute(member) for member in provider.and_providers)
    operands = tuple(t for t in terms if t is not None)
    if not operands:
        return None
    return conjunction(operands)


def compile_providers(registry: ProviderRegistry) -> Expression:
    """Fold the registry into a single expression.

    Returns:
        OR of the contributing groups. MATCH_NOTHING when no provider
        contributes.
    """
    groups = tuple(g for g in (compile_group(p) for p in registry.providers) if g is not None)
    if not groups:
        return MATCH_NOTHING
    return disjunction(groups)


def compile_query(
    registry: ProviderRegistry,
    kql_expression: str = "",
    kql_mode: KqlMode = KqlMode.FILTER,
) -> CompiledQuery:
    """Combine the providers with a free-text query.

    No providers and blank text: empty query. One side only: that side.
    Both: AND in filter mode, OR in search mode.

    Args:
        registry: Provider registry
        kql_expression: Free text typed by the user
        kql_mode: Combination mode

    Returns:
        CompiledQuery
    """
    provider_expression = compile_providers(registry)
    text = kql_expression.strip()

    if not text:
        expression = provider_expression
    elif is_match_nothing(provider_expression):
        expression = RawQuery(text)
    elif kql_mode is KqlMode.FILTER:
        expression = And((provider_expression, RawQuery(text)))
    else:
        expression = Or((provider_expression, RawQuery(text)))

    return CompiledQuery(
        expression=expression,
        provider_expression=provider_expression,
        kql_mode=kql_mode,
    )
