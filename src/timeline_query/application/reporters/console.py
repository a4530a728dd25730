"""Console reporter: QueryView → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from timeline_query.application.reporters._base import BaseReporter, describe_provider
from timeline_query.infrastructure.filters.fields import MISSING, get_field
from timeline_query.infrastructure.serializers.kql import to_kql

if TYPE_CHECKING:
    from timeline_query.application.query_view import QueryView
    from timeline_query.domain.model.provider import Provider
    from timeline_query.domain.model.window import Window


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        columns: Row fields shown in the events table.
        show_disabled: Show disabled providers in the composition tree.
        show_rows: Render the events table when a window is present.
        width: Console width in characters.
    """

    columns: tuple[str, ...] = ("@timestamp", "event.action", "host.name", "user.name")
    show_disabled: bool = True
    show_rows: bool = True
    width: int = 120


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, view: QueryView) -> str:
        """Format query view as rich formatted string.

        Args:
            view: Query view to format.

        Returns:
            Formatted string with colors, tree and table.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        console.print()
        console.rule("[bold]TIMELINE[/bold]")
        console.print()

        console.print(self._build_tree(view))
        console.print()

        kql = to_kql(view.compiled.expression)
        console.print(f"[bold]Query:[/bold] {escape(kql) if kql else '[dim]<none>[/dim]'}")
        console.print()

        if view.window is not None and self._config.show_rows:
            self._render_window(console, view.window, view.show_pagination)

        return output.getvalue()

    def _build_tree(self, view: QueryView) -> Tree:
        tree = Tree(f"[bold]Providers[/bold] ({len(view.registry)})")
        if view.registry.is_empty:
            tree.add("[dim]drop anything highlighted here to build an OR query[/dim]")
            return tree

        for provider in view.registry:
            if not provider.enabled and not self._config.show_disabled:
                continue
            branch = tree.add(self._label(provider))
            for member in provider.and_providers:
                if not member.enabled and not self._config.show_disabled:
                    continue
                branch.add(f"[magenta]AND[/magenta] {self._label(member)}")
        return tree

    def _label(self, provider: Provider) -> str:
        text = escape(describe_provider(provider))
        if not provider.enabled:
            return f"[dim]{text}[/dim]"
        if provider.excluded:
            return f"[red]{text}[/red]"
        return f"[cyan]{text}[/cyan]"

    def _render_window(self, console: Console, window: Window, show_pagination: bool) -> None:
        table = Table(show_header=True, header_style="bold", box=None)
        for column in self._config.columns:
            style = "cyan" if column == window.state.sort.column_id else None
            table.add_column(column, style=style)

        for row in window.rows:
            cells = []
            for column in self._config.columns:
                value = get_field(row, column)
                cells.append("" if value is MISSING or value is None else escape(str(value)))
            table.add_row(*cells)

        console.print(table)
        console.print()

        if show_pagination:
            state = window.state
            current = window.page + 1 if window.page_count else 0
            console.print(
                f"[dim]Page {current}/{window.page_count} | "
                f"{state.items_per_page} per page | {window.total_count} total[/dim]"
            )
            console.print()
