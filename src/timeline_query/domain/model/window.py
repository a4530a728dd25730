"""Sort and pagination value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from timeline_query.domain.exceptions import InvalidWindowError
from timeline_query.domain.model.enums import Direction

if TYPE_CHECKING:
    from collections.abc import Mapping

type Row = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Sort:
    """Sort key over result rows.

    Attributes:
        column_id: Field to sort by (dotted for nested fields)
        sort_direction: Ascending or descending
    """

    column_id: str
    sort_direction: Direction = Direction.DESC

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.column_id:
            raise ValueError("column_id must not be empty")

    def to_dict(self) -> dict[str, str]:
        """Wire shape: {"columnId", "sortDirection"}."""
        return {"columnId": self.column_id, "sortDirection": self.sort_direction.value}


@dataclass(frozen=True, slots=True)
class WindowState:
    """Sort + pagination state of the event feed.

    Constructed states are always valid: items_per_page is one of the
    options and page is non-negative. Requests that disagree with the
    options are clamped by the window manager before a state is built.

    Attributes:
        sort: Current sort key
        items_per_page: Page size, member of items_per_page_options
        items_per_page_options: Ordered candidate page sizes
        page: Zero-based page index
    """

    sort: Sort
    items_per_page: int
    items_per_page_options: tuple[int, ...]
    page: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.items_per_page_options:
            raise InvalidWindowError("items_per_page_options must not be empty")
        if any(n < 1 for n in self.items_per_page_options):
            raise InvalidWindowError(
                f"items_per_page_options must be >= 1, got {self.items_per_page_options}"
            )
        if len(set(self.items_per_page_options)) != len(self.items_per_page_options):
            raise InvalidWindowError(
                f"items_per_page_options must be unique, got {self.items_per_page_options}"
            )
        if self.items_per_page not in self.items_per_page_options:
            raise InvalidWindowError(
                f"items_per_page {self.items_per_page} not in {self.items_per_page_options}"
            )
        if self.page < 0:
            raise InvalidWindowError(f"page must be >= 0, got {self.page}")

    @property
    def offset(self) -> int:
        """Index of the first row on the current page."""
        return self.page * self.items_per_page

    def to_dict(self) -> dict[str, object]:
        """Parameters handed to the query execution collaborator."""
        return {
            "sort": self.sort.to_dict(),
            "itemsPerPage": self.items_per_page,
            "itemsPerPageOptions": list(self.items_per_page_options),
            "page": self.page,
        }


@dataclass(frozen=True, slots=True)
class ResultSet:
    """Materialized rows returned by executing a compiled query.

    Attributes:
        rows: Rows in backend order
        total_count: Total hits reported by the backend. None = len(rows)
    """

    rows: tuple[Row, ...]
    total_count: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.total_count is not None and self.total_count < len(self.rows):
            raise ValueError(
                f"total_count ({self.total_count}) must be >= row count ({len(self.rows)})"
            )

    @property
    def total(self) -> int:
        """Total hits, falling back to the materialized row count."""
        return len(self.rows) if self.total_count is None else self.total_count

    @classmethod
    def empty(cls) -> ResultSet:
        """Create result set with no rows."""
        return cls(rows=())


@dataclass(frozen=True, slots=True)
class Window:
    """Sorted, paginated slice of result rows currently displayed.

    Attributes:
        rows: Rows on the current page
        state: Window state actually applied (page clamped into range)
        page_count: Number of pages over the materialized rows
        total_count: Total hits reported by the backend
    """

    rows: tuple[Row, ...]
    state: WindowState
    page_count: int
    total_count: int

    @property
    def page(self) -> int:
        """Zero-based index of the displayed page."""
        return self.state.page

    @property
    def has_next(self) -> bool:
        """True if a later page exists."""
        return self.state.page + 1 < self.page_count

    @property
    def has_previous(self) -> bool:
        """True if an earlier page exists."""
        return self.state.page > 0
