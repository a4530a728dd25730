"""timeline_query - provider composition, query compilation and result windows for event timelines."""

import logging

__version__ = "0.1.0"

from timeline_query.application.compiler import CompiledQuery, compile_providers, compile_query
from timeline_query.application.reducer import reduce, replay
from timeline_query.application.services import Timeline, TimelineCallbacks
from timeline_query.application.window_manager import apply_window
from timeline_query.domain.model import (
    Provider,
    ProviderRegistry,
    QueryMatch,
    RemoveAndProvider,
    RemoveProvider,
    ToggleEnabled,
    ToggleExcluded,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CompiledQuery",
    "Provider",
    "ProviderRegistry",
    "QueryMatch",
    "RemoveAndProvider",
    "RemoveProvider",
    "Timeline",
    "TimelineCallbacks",
    "ToggleEnabled",
    "ToggleExcluded",
    "__version__",
    "apply_window",
    "compile_providers",
    "compile_query",
    "reduce",
    "replay",
]
