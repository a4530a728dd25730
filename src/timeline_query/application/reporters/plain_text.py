"""Plain text reporter.

Stdlib-only reporter for logs and doctests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from timeline_query.application.reporters._base import BaseReporter, describe_provider
from timeline_query.infrastructure.serializers.kql import to_kql

if TYPE_CHECKING:
    from timeline_query.application.query_view import QueryView
    from timeline_query.domain.model.window import Window


class PlainTextReporter(BaseReporter):
    """Plain text reporter.

    Layout:
        Providers (N):
          1. name: "Provider 1"
             AND name: "Provider 2"
        Query: (name : "Provider 1" and name : "Provider 2")
        Sort: @timestamp desc | Page 1/5 | 5 per page | 23 total
    """

    def report(self, view: QueryView) -> str:
        """Format query view as plain text."""
        lines: list[str] = []
        self._report_providers(lines, view)
        lines.append(f"Query: {to_kql(view.compiled.expression) or '<none>'}")
        lines.append(self._window_line(view))
        return "\n".join(lines) + "\n"

    def _report_providers(self, lines: list[str], view: QueryView) -> None:
        lines.append(f"Providers ({len(view.registry)}):")
        if view.registry.is_empty:
            lines.append("  (none)")
            return
        for i, provider in enumerate(view.registry, start=1):
            lines.append(f"  {i}. {describe_provider(provider)}")
            for member in provider.and_providers:
                lines.append(f"     AND {describe_provider(member)}")

    def _window_line(self, view: QueryView) -> str:
        state = view.state
        parts = [f"Sort: {state.sort.column_id} {state.sort.sort_direction.value}"]
        if view.window is not None and view.show_pagination:
            parts.append(_page_label(view.window))
        parts.append(f"{state.items_per_page} per page")
        if view.window is not None:
            parts.append(f"{view.window.total_count} total")
        return " | ".join(parts)


def _page_label(window: Window) -> str:
    if window.page_count == 0:
        return "Page 0/0"
    return f"Page {window.page + 1}/{window.page_count}"
