"""JSON-compatible forms of expressions and provider lists.

Expression documents:
    {"match": {"field": ..., "value": ..., "operator": ":"}}
    {"not": <expr>}
    {"and": [<expr>, ...]}
    {"or": [<expr>, ...]}
    {"kql": "..."}

Provider documents use the camelCase shape of saved timelines:
    {"id", "name", "enabled", "excluded", "kqlQuery",
     "queryMatch": {"field", "value", "displayValue", "operator"},
     "and": [<provider>, ...]}
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from timeline_query.domain.exceptions import InvalidExpressionError, TimelineQueryError
from timeline_query.domain.model.expression import And, Match, Not, Or, RawQuery
from timeline_query.domain.model.provider import Provider
from timeline_query.domain.model.query_match import QueryMatch, QueryOperator
from timeline_query.domain.model.registry import ProviderRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from timeline_query.domain.model.expression import Expression


# =============================================================================
# Expressions
# =============================================================================


def expression_to_dict(expression: Expression) -> dict[str, Any]:
    """Convert Expression to dict."""
    match expression:
        case Match():
            return {
                "match": {
                    "field": expression.field,
                    "value": expression.value,
                    "operator": expression.operator.value,
                }
            }
        case Not():
            return {"not": expression_to_dict(expression.operand)}
        case And():
            return {"and": [expression_to_dict(op) for op in expression.operands]}
        case Or():
            return {"or": [expression_to_dict(op) for op in expression.operands]}
        case RawQuery():
            return {"kql": expression.text}


def expression_from_dict(data: Any) -> Expression:
    """Convert dict to Expression.

    Raises:
        InvalidExpressionError: If the document is malformed
    """
    if not isinstance(data, Mapping) or len(data) != 1:
        raise InvalidExpressionError(f"expression must be a single-key object, got {data!r}")

    ((kind, body),) = data.items()
    match kind:
        case "match":
            if not isinstance(body, Mapping):
                raise InvalidExpressionError(f"match body must be an object, got {body!r}")
            return _build(
                Match,
                field=_require(body, "field", str),
                value=_require(body, "value", str | int | float),
                operator=_operator(body.get("operator", QueryOperator.IS.value)),
            )
        case "not":
            return Not(expression_from_dict(body))
        case "and" | "or":
            if not isinstance(body, list):
                raise InvalidExpressionError(f"{kind} body must be a list, got {body!r}")
            operands = tuple(expression_from_dict(op) for op in body)
            return And(operands) if kind == "and" else Or(operands)
        case "kql":
            if not isinstance(body, str):
                raise InvalidExpressionError(f"kql body must be a string, got {body!r}")
            return _build(RawQuery, text=body)
        case _:
            raise InvalidExpressionError(f"unknown expression kind: {kind!r}")


# =============================================================================
# Providers
# =============================================================================


def provider_to_dict(provider: Provider) -> dict[str, Any]:
    """Convert Provider to its saved-timeline document."""
    query_match = provider.query_match
    match_doc: dict[str, Any] = {
        "field": query_match.field,
        "value": query_match.value,
        "operator": query_match.operator.value,
    }
    if query_match.display_value is not None:
        match_doc["displayValue"] = query_match.display_value
    return {
        "id": provider.id,
        "name": provider.name,
        "enabled": provider.enabled,
        "excluded": provider.excluded,
        "kqlQuery": provider.kql_query,
        "queryMatch": match_doc,
        "and": [provider_to_dict(member) for member in provider.and_providers],
    }


def provider_from_dict(data: Any) -> Provider:
    """Convert saved-timeline document to Provider.

    Raises:
        InvalidExpressionError: If the document is malformed
        InvalidProviderError: If the provider violates a structural invariant
    """
    if not isinstance(data, Mapping):
        raise InvalidExpressionError(f"provider must be an object, got {data!r}")

    match_doc = _require(data, "queryMatch", Mapping)
    and_docs = data.get("and", [])
    if not isinstance(and_docs, list):
        raise InvalidExpressionError(f"'and' must be a list, got {and_docs!r}")

    display_value = match_doc.get("displayValue")
    query_match = _build(
        QueryMatch,
        field=_require(match_doc, "field", str),
        value=_require(match_doc, "value", str | int | float),
        display_value=None if display_value is None else str(display_value),
        operator=_operator(match_doc.get("operator", QueryOperator.IS.value)),
    )
    return Provider(
        id=_require(data, "id", str),
        name=_require(data, "name", str),
        query_match=query_match,
        enabled=_optional(data, "enabled", bool, True),
        excluded=_optional(data, "excluded", bool, False),
        kql_query=_optional(data, "kqlQuery", str, ""),
        and_providers=tuple(provider_from_dict(member) for member in and_docs),
    )


def providers_to_dicts(registry: ProviderRegistry) -> list[dict[str, Any]]:
    """Convert registry to a list of provider documents."""
    return [provider_to_dict(p) for p in registry.providers]


def providers_from_dicts(data: Iterable[Any]) -> ProviderRegistry:
    """Build a registry from provider documents.

    Raises:
        InvalidExpressionError: If a document is malformed
    """
    try:
        providers = [provider_from_dict(d) for d in data]
    except RecursionError as e:
        raise InvalidExpressionError("provider document is nested too deeply") from e
    return ProviderRegistry.from_providers(providers)


def dumps(expression: Expression, *, indent: int | None = None) -> str:
    """Serialize expression to a JSON string."""
    return json.dumps(expression_to_dict(expression), indent=indent)


def loads(text: str) -> Expression:
    """Parse expression from a JSON string.

    Raises:
        InvalidExpressionError: If the text is not JSON or not an expression
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidExpressionError(f"invalid JSON: {e}") from e
    except RecursionError as e:
        raise InvalidExpressionError("document is nested too deeply") from e
    try:
        return expression_from_dict(data)
    except RecursionError as e:
        raise InvalidExpressionError("expression is nested too deeply") from e


# =============================================================================
# Helpers
# =============================================================================


def _require(data: Mapping[str, Any], key: str, expected: Any) -> Any:
    if key not in data:
        raise InvalidExpressionError(f"missing required key {key!r}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, expected):
        raise InvalidExpressionError(f"{key!r} has wrong type: {type(value).__name__}")
    return value


def _optional(data: Mapping[str, Any], key: str, expected: type, default: Any) -> Any:
    value = data.get(key, default)
    if type(value) is not expected:
        raise InvalidExpressionError(f"{key!r} must be {expected.__name__}, got {value!r}")
    return value


def _operator(raw: Any) -> QueryOperator:
    try:
        return QueryOperator(raw)
    except ValueError as e:
        raise InvalidExpressionError(f"unknown operator: {raw!r}") from e


def _build(cls: Any, **kwargs: Any) -> Any:
    """Construct a value object, reporting invariant failures as document errors."""
    try:
        return cls(**kwargs)
    except TimelineQueryError:
        raise
    except (TypeError, ValueError) as e:
        raise InvalidExpressionError(f"invalid {cls.__name__}: {e}") from e
