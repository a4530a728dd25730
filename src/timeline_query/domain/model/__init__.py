"""Domain model entities."""

from timeline_query.domain.model.configuration import TimelineConfig
from timeline_query.domain.model.enums import Direction, KqlMode, ToggleField
from timeline_query.domain.model.expression import (
    MATCH_NOTHING,
    And,
    Expression,
    Match,
    Not,
    Or,
    RawQuery,
)
from timeline_query.domain.model.intents import (
    Intent,
    RemoveAndProvider,
    RemoveProvider,
    ToggleEnabled,
    ToggleExcluded,
)
from timeline_query.domain.model.payloads import (
    AndProviderRemoved,
    NestedToggle,
    Payload,
    ProviderRemoved,
    TopLevelToggle,
    UnresolvedReference,
)
from timeline_query.domain.model.provider import Provider
from timeline_query.domain.model.provider_key import ProviderKey
from timeline_query.domain.model.query_match import QueryMatch, QueryOperator
from timeline_query.domain.model.registry import ProviderRegistry
from timeline_query.domain.model.window import ResultSet, Row, Sort, Window, WindowState

__all__ = [
    # Enums
    "Direction",
    "KqlMode",
    "QueryOperator",
    "ToggleField",
    # Providers
    "Provider",
    "ProviderKey",
    "ProviderRegistry",
    "QueryMatch",
    # Intents
    "Intent",
    "RemoveAndProvider",
    "RemoveProvider",
    "ToggleEnabled",
    "ToggleExcluded",
    # Payloads
    "AndProviderRemoved",
    "NestedToggle",
    "Payload",
    "ProviderRemoved",
    "TopLevelToggle",
    "UnresolvedReference",
    # Expression
    "MATCH_NOTHING",
    "And",
    "Expression",
    "Match",
    "Not",
    "Or",
    "RawQuery",
    # Window
    "ResultSet",
    "Row",
    "Sort",
    "Window",
    "WindowState",
    # Configuration
    "TimelineConfig",
]
