"""JSON reporter: QueryView → JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from timeline_query.application.reporters._base import BaseReporter
from timeline_query.infrastructure.serializers.json import (
    expression_to_dict,
    providers_to_dicts,
)
from timeline_query.infrastructure.serializers.kql import to_kql

if TYPE_CHECKING:
    from timeline_query.application.query_view import QueryView
    from timeline_query.domain.model.window import Window


class JsonReporter(BaseReporter):
    """JSON reporter: outputs machine-readable JSON.

    Schema: providers, query (tree + KQL), window parameters, and the
    current page when results were applied.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, view: QueryView) -> str:
        """Format query view as JSON string."""
        data = {
            "dataProviders": providers_to_dicts(view.registry),
            "query": {
                "expression": expression_to_dict(view.compiled.expression),
                "kql": to_kql(view.compiled.expression),
                "kqlMode": view.compiled.kql_mode.value,
                "empty": view.compiled.is_empty,
            },
            "window": view.state.to_dict(),
            "showPagination": view.show_pagination,
            "page": _window_to_dict(view.window) if view.window is not None else None,
        }
        return json.dumps(data, indent=self._indent, default=str)


def _window_to_dict(window: Window) -> dict[str, object]:
    return {
        "rows": [dict(row) for row in window.rows],
        "pageCount": window.page_count,
        "totalCount": window.total_count,
        "hasNext": window.has_next,
        "hasPrevious": window.has_previous,
    }
