"""Query view: everything the presentation layer consumes at once."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timeline_query.application.compiler import CompiledQuery
    from timeline_query.domain.model.registry import ProviderRegistry
    from timeline_query.domain.model.window import Window, WindowState


@dataclass(frozen=True, slots=True)
class QueryView:
    """Registry, compiled query and window state travelling together.

    Attributes:
        registry: Current providers
        compiled: Query compiled from registry (and free text)
        state: Sort/pagination state
        window: Rows of the current page. None = no results applied yet
    """

    registry: ProviderRegistry
    compiled: CompiledQuery
    state: WindowState
    window: Window | None = None

    @property
    def show_pagination(self) -> bool:
        """Pagination footer is rendered only when providers exist."""
        return not self.registry.is_empty
