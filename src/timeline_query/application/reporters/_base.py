"""Base reporter class for query view output.

Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timeline_query.application.query_view import QueryView
    from timeline_query.domain.model.provider import Provider


class BaseReporter(ABC):
    """Base class for query view reporters.

    Output is str, not print(). Caller decides destination.

    Example:
        class CountReporter(BaseReporter):
            def report(self, view: QueryView) -> str:
                return f"Providers: {len(view.registry)}"
    """

    @abstractmethod
    def report(self, view: QueryView) -> str:
        """Format a query view.

        Args:
            view: Registry, compiled query and window to format

        Returns:
            Formatted text
        """


def describe_provider(provider: Provider) -> str:
    """One-line provider label with its state flags."""
    flags = []
    if not provider.enabled:
        flags.append("disabled")
    if provider.excluded:
        flags.append("excluded")
    suffix = f" [{', '.join(flags)}]" if flags else ""
    prefix = "NOT " if provider.excluded else ""
    return f"{prefix}{provider.query_match}{suffix}"
