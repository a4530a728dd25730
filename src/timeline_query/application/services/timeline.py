"""Timeline session: registry + window state + subscriber callbacks.

Single-owner convenience object for a front end (or a headless test
harness). Intents are applied in call order against the latest committed
registry. Every committed registry is kept for undo/redo; the registries
themselves are immutable, so old snapshots stay valid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from timeline_query.application import window_manager
from timeline_query.application.compiler import compile_query
from timeline_query.application.query_view import QueryView
from timeline_query.application.reducer import reduce
from timeline_query.domain.exceptions import CallbackError
from timeline_query.domain.model.configuration import TimelineConfig
from timeline_query.domain.model.intents import (
    RemoveAndProvider,
    RemoveProvider,
    ToggleEnabled,
    ToggleExcluded,
)
from timeline_query.domain.model.payloads import (
    AndProviderRemoved,
    NestedToggle,
    ProviderRemoved,
    TopLevelToggle,
)
from timeline_query.domain.model.registry import ProviderRegistry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import Any

    from timeline_query.application.compiler import CompiledQuery
    from timeline_query.domain.model.enums import KqlMode
    from timeline_query.domain.model.intents import Intent
    from timeline_query.domain.model.payloads import Payload
    from timeline_query.domain.model.provider import Provider
    from timeline_query.domain.model.reduction import Reduction
    from timeline_query.domain.model.window import ResultSet, Sort, Window, WindowState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TimelineCallbacks:
    """Subscriber callbacks, named after the timeline's event props.

    None = not subscribed.

    Attributes:
        on_data_provider_removed: Called with (provider_id,) or
            (provider_id, and_provider_id).
        on_toggle_data_provider_enabled: Called with {"providerId", "enabled"}
            or {"providerId", "andProviderId", "enabled"}.
        on_toggle_data_provider_excluded: Same shapes with "excluded".
        on_change_items_per_page: Called with the (clamped) page size.
        on_change_sort: Called with the new Sort.
    """

    on_data_provider_removed: Callable[..., Any] | None = None
    on_toggle_data_provider_enabled: Callable[[dict[str, object]], Any] | None = None
    on_toggle_data_provider_excluded: Callable[[dict[str, object]], Any] | None = None
    on_change_items_per_page: Callable[[int], Any] | None = None
    on_change_sort: Callable[[Sort], Any] | None = None


class Timeline:
    """Event timeline session.

    Attributes:
        _config: Timeline configuration
        _callbacks: Subscriber callbacks
        _history: Committed registries, oldest first
        _cursor: Index of the current registry in _history
        _state: Sort/pagination state
        _kql_expression: Free text combined with the providers
        _kql_mode: How free text combines with the providers
    """

    def __init__(
        self,
        providers: ProviderRegistry | Iterable[Provider] = (),
        config: TimelineConfig | None = None,
        callbacks: TimelineCallbacks | None = None,
        kql_expression: str = "",
    ) -> None:
        """Initialize timeline.

        Args:
            providers: Initial registry or provider list
            config: Configuration. Uses defaults if None.
            callbacks: Subscriber callbacks. None = no subscribers.
            kql_expression: Initial free-text query
        """
        registry = (
            providers
            if isinstance(providers, ProviderRegistry)
            else ProviderRegistry.from_providers(providers)
        )
        self._config = config or TimelineConfig()
        self._callbacks = callbacks or TimelineCallbacks()
        self._history: list[ProviderRegistry] = [registry]
        self._cursor = 0
        self._state = self._config.initial_window_state()
        self._kql_expression = kql_expression
        self._kql_mode = self._config.kql_mode

    # -------------------------------------------------------------------------
    # State access
    # -------------------------------------------------------------------------

    @property
    def registry(self) -> ProviderRegistry:
        """Current provider registry."""
        return self._history[self._cursor]

    @property
    def state(self) -> WindowState:
        """Current sort/pagination state."""
        return self._state

    @property
    def config(self) -> TimelineConfig:
        """Timeline configuration."""
        return self._config

    @property
    def kql_expression(self) -> str:
        """Free text combined with the providers."""
        return self._kql_expression

    @property
    def kql_mode(self) -> KqlMode:
        """How free text combines with the providers."""
        return self._kql_mode

    @property
    def compiled_query(self) -> CompiledQuery:
        """Query compiled from the current registry and free text."""
        return compile_query(self.registry, self._kql_expression, self._kql_mode)

    @property
    def show_pagination(self) -> bool:
        """Pagination footer is rendered only when providers exist."""
        return not window_manager.is_empty(self.registry)

    def window(self, result_set: ResultSet) -> Window:
        """Sorted, paginated rows for the current state."""
        return window_manager.apply_window(result_set, self._state)

    def view(self, result_set: ResultSet | None = None) -> QueryView:
        """Everything the presentation layer needs, in one value."""
        return QueryView(
            registry=self.registry,
            compiled=self.compiled_query,
            state=self._state,
            window=self.window(result_set) if result_set is not None else None,
        )

    # -------------------------------------------------------------------------
    # Provider intents
    # -------------------------------------------------------------------------

    def dispatch(self, intent: Intent) -> Reduction:
        """Apply an intent, commit the new registry and notify subscribers.

        Unresolved intents are no-ops: nothing is committed or notified.

        Raises:
            CallbackError: If a subscriber raised. The transition stays
                committed.
        """
        result = reduce(self.registry, intent)
        if result.payload is None:
            return result

        del self._history[self._cursor + 1 :]
        self._history.append(result.registry)
        self._cursor += 1
        self._notify(result.payload)
        return result

    def remove_provider(self, provider_id: str) -> Reduction:
        """Remove a top-level provider and its AND-group."""
        return self.dispatch(RemoveProvider(provider_id))

    def remove_and_provider(self, provider_id: str, and_provider_id: str) -> Reduction:
        """Remove one AND-member."""
        return self.dispatch(RemoveAndProvider(provider_id, and_provider_id))

    def toggle_enabled(self, provider_id: str, and_provider_id: str | None = None) -> Reduction:
        """Flip `enabled` on a provider or AND-member."""
        return self.dispatch(ToggleEnabled(provider_id, and_provider_id))

    def toggle_excluded(self, provider_id: str, and_provider_id: str | None = None) -> Reduction:
        """Flip `excluded` on a provider or AND-member."""
        return self.dispatch(ToggleExcluded(provider_id, and_provider_id))

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        """True if an earlier registry exists."""
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        """True if an undone registry can be restored."""
        return self._cursor + 1 < len(self._history)

    def undo(self) -> bool:
        """Step back to the previous registry. False if there is none."""
        if not self.can_undo:
            return False
        self._cursor -= 1
        logger.debug("undo: now at revision %d of %d", self._cursor, len(self._history) - 1)
        return True

    def redo(self) -> bool:
        """Step forward to an undone registry. False if there is none."""
        if not self.can_redo:
            return False
        self._cursor += 1
        logger.debug("redo: now at revision %d of %d", self._cursor, len(self._history) - 1)
        return True

    # -------------------------------------------------------------------------
    # Window and free text
    # -------------------------------------------------------------------------

    def change_items_per_page(self, items_per_page: int) -> WindowState:
        """Change page size (clamped to the options). Resets page to 0."""
        self._state = window_manager.change_items_per_page(self._state, items_per_page)
        self._call("on_change_items_per_page", self._state.items_per_page)
        return self._state

    def change_sort(self, sort: Sort) -> WindowState:
        """Change the sort key."""
        self._state = window_manager.change_sort(self._state, sort)
        self._call("on_change_sort", sort)
        return self._state

    def go_to_page(self, page: int, row_count: int | None = None) -> WindowState:
        """Move to a page (clamped)."""
        self._state = window_manager.go_to_page(self._state, page, row_count)
        return self._state

    def change_kql_query(self, kql_expression: str, kql_mode: KqlMode | None = None) -> None:
        """Replace the free-text query and optionally its combination mode."""
        self._kql_expression = kql_expression
        if kql_mode is not None:
            self._kql_mode = kql_mode

    # -------------------------------------------------------------------------
    # Notification
    # -------------------------------------------------------------------------

    def _notify(self, payload: Payload) -> None:
        match payload:
            case ProviderRemoved() | AndProviderRemoved():
                self._call("on_data_provider_removed", *payload.as_args())
            case TopLevelToggle() | NestedToggle():
                name = f"on_toggle_data_provider_{payload.toggle_field.value}"
                self._call(name, payload.to_dict())

    def _call(self, name: str, *args: object) -> None:
        callback = getattr(self._callbacks, name)
        if callback is None:
            return
        logger.debug("notifying %s%r", name, args)
        try:
            callback(*args)
        except Exception as e:
            raise CallbackError(name, e) from e
