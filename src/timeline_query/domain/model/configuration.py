"""Timeline configuration.

Defaults match the event timeline: 25 rows per page out of
(10, 25, 50, 100), newest events first, free text acting as a filter.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from timeline_query.domain.exceptions import InvalidWindowError
from timeline_query.domain.model.enums import Direction, KqlMode
from timeline_query.domain.model.window import Sort, WindowState

DEFAULT_ITEMS_PER_PAGE = 25
DEFAULT_ITEMS_PER_PAGE_OPTIONS = (10, 25, 50, 100)
DEFAULT_SORT_COLUMN = "@timestamp"


@dataclass(frozen=True, slots=True)
class TimelineConfig:
    """Timeline configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        items_per_page: Initial page size. Must be one of the options.
        items_per_page_options: Ordered candidate page sizes.
        sort: Initial sort key.
        kql_mode: How free text combines with the providers.
    """

    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    items_per_page_options: tuple[int, ...] = DEFAULT_ITEMS_PER_PAGE_OPTIONS
    sort: Sort = field(default_factory=lambda: Sort(DEFAULT_SORT_COLUMN, Direction.DESC))
    kql_mode: KqlMode = KqlMode.FILTER

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.items_per_page_options:
            raise InvalidWindowError("items_per_page_options must not be empty")
        if self.items_per_page not in self.items_per_page_options:
            raise InvalidWindowError(
                f"items_per_page {self.items_per_page} not in {self.items_per_page_options}"
            )

    def initial_window_state(self) -> WindowState:
        """Window state the timeline starts from (page 0)."""
        return WindowState(
            sort=self.sort,
            items_per_page=self.items_per_page,
            items_per_page_options=self.items_per_page_options,
        )
