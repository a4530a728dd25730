"""timeline_query application layer.

Pure use cases over the domain model: reducer, compiler, window manager,
the Timeline session and reporters.
"""

from timeline_query.application.compiler import (
    CompiledQuery,
    compile_group,
    compile_providers,
    compile_query,
    contribute,
)
from timeline_query.application.query_view import QueryView
from timeline_query.application.reducer import (
    reduce,
    remove_and_provider,
    remove_provider,
    replay,
    toggle_enabled,
    toggle_excluded,
)
from timeline_query.application.services import Timeline, TimelineCallbacks
from timeline_query.application.window_manager import (
    apply_window,
    change_items_per_page,
    change_sort,
    go_to_page,
    is_empty,
)

__all__ = [
    "CompiledQuery",
    "QueryView",
    "Timeline",
    "TimelineCallbacks",
    "apply_window",
    "change_items_per_page",
    "change_sort",
    "compile_group",
    "compile_providers",
    "compile_query",
    "contribute",
    "go_to_page",
    "is_empty",
    "reduce",
    "remove_and_provider",
    "remove_provider",
    "replay",
    "toggle_enabled",
    "toggle_excluded",
]
