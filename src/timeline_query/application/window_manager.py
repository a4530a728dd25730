"""Result window manager: sort + pagination over materialized rows.

Pure functions over WindowState. Requests that disagree with the
configured options are clamped, never rejected:
    - page size: nearest option, ties go to the smaller option
    - page index: into [0, page_count - 1] (0 when there are no rows)
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from timeline_query.domain.model.enums import Direction
from timeline_query.domain.model.window import Window, WindowState
from timeline_query.infrastructure.filters.fields import MISSING, get_field

if TYPE_CHECKING:
    from collections.abc import Sequence

    from timeline_query.domain.model.registry import ProviderRegistry
    from timeline_query.domain.model.window import ResultSet, Row, Sort

logger = logging.getLogger(__name__)


def is_empty(registry: ProviderRegistry) -> bool:
    """True when there are no top-level providers.

    The presentation layer hides the pagination footer in that case.
    """
    return registry.is_empty


def clamp_items_per_page(requested: int, options: Sequence[int]) -> int:
    """Nearest valid page size. Ties resolve to the smaller option."""
    if requested in options:
        return requested
    clamped = min(options, key=lambda option: (abs(option - requested), option))
    logger.debug("items_per_page %d not in %s, clamped to %d", requested, tuple(options), clamped)
    return clamped


def page_count(row_count: int, items_per_page: int) -> int:
    """Number of pages needed for row_count rows. 0 rows = 0 pages."""
    return -(-row_count // items_per_page)


def clamp_page(requested: int, pages: int) -> int:
    """Page index clamped into [0, pages - 1]. 0 when there are no pages."""
    clamped = max(0, min(requested, pages - 1))
    if clamped != requested:
        logger.debug("page %d out of range (%d pages), clamped to %d", requested, pages, clamped)
    return clamped


def change_items_per_page(state: WindowState, items_per_page: int) -> WindowState:
    """New page size (clamped to the options). Resets page to 0."""
    size = clamp_items_per_page(items_per_page, state.items_per_page_options)
    return replace(state, items_per_page=size, page=0)


def change_items_per_page_options(state: WindowState, options: Sequence[int]) -> WindowState:
    """Replace the options, re-clamping the current page size.

    Page resets to 0 only when the page size had to change.
    """
    new_options = tuple(options)
    size = clamp_items_per_page(state.items_per_page, new_options) if new_options else 0
    page = state.page if size == state.items_per_page else 0
    return WindowState(
        sort=state.sort,
        items_per_page=size,
        items_per_page_options=new_options,
        page=page,
    )


def change_sort(state: WindowState, sort: Sort) -> WindowState:
    """New sort key. Page is kept."""
    return replace(state, sort=sort)


def go_to_page(state: WindowState, page: int, row_count: int | None = None) -> WindowState:
    """Move to a page.

    Args:
        state: Current state
        page: Requested zero-based page
        row_count: Rows available. None = only clamp negatives

    Returns:
        State with the clamped page
    """
    if row_count is None:
        return replace(state, page=max(0, page))
    return replace(state, page=clamp_page(page, page_count(row_count, state.items_per_page)))


def sort_rows(rows: Sequence[Row], sort: Sort) -> tuple[Row, ...]:
    """Stable sort by sort.column_id.

    Ties keep their original order in both directions. Rows without the
    column go last, in original order.
    """
    present: list[tuple[Any, Row]] = []
    missing: list[Row] = []
    for row in rows:
        value = get_field(row, sort.column_id)
        if value is MISSING or value is None:
            missing.append(row)
        else:
            present.append((_sort_key(value), row))

    # sorted() is stable for reverse=True too
    present.sort(key=lambda pair: pair[0], reverse=sort.sort_direction is Direction.DESC)
    return tuple(row for _, row in present) + tuple(missing)


def apply_window(result_set: ResultSet, state: WindowState) -> Window:
    """Sort the rows and slice out the current page.

    Args:
        result_set: Rows returned by executing the compiled query
        state: Current sort/pagination state (page clamped if out of range)

    Returns:
        Window with the rows of the current page
    """
    pages = page_count(len(result_set.rows), state.items_per_page)
    applied = replace(state, page=clamp_page(state.page, pages))

    ordered = sort_rows(result_set.rows, applied.sort)
    start = applied.offset
    return Window(
        rows=ordered[start : start + applied.items_per_page],
        state=applied,
        page_count=pages,
        total_count=result_set.total,
    )


def _sort_key(value: Any) -> tuple[int, Any]:
    """Total order over mixed value types: numbers, then strings, then the rest."""
    if isinstance(value, bool):
        return (0, int(value))
    if isinstance(value, int | float):
        return (0, value)
    if isinstance(value, str):
        return (1, value)
    if isinstance(value, list | tuple):
        return _sort_key(value[0]) if value else (2, "")
    return (2, str(value))
