"""Rich-backed output for CLI commands.

Results go to stdout and problems to stderr, so command output stays
pipeable. Commands should print through ``get_console()`` only.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.table import Table

Column = tuple[str, str]  # (row key, header)


class Console:
    def __init__(self, *, force_terminal: bool | None = None) -> None:
        self._out = RichConsole(force_terminal=force_terminal)
        self._err = RichConsole(force_terminal=force_terminal, stderr=True)

    def success(self, message: str) -> None:
        self._out.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Report a failure on stderr, with an optional dimmed hint line."""
        self._err.print(f"[red]✗[/red] {message}")
        if hint is not None:
            self._err.print(f"  [dim]{hint}[/dim]")

    def info(self, message: str) -> None:
        self._out.print(f"[dim]{message}[/dim]")

    def print(self, *objects: Any) -> None:
        # URLs and ids must survive copy/paste unwrapped
        self._out.print(*objects, soft_wrap=True, highlight=False)

    def table(
        self,
        rows: Iterable[Mapping[str, Any]],
        columns: list[Column],
        *,
        title: str | None = None,
    ) -> None:
        """Render ``rows`` with one column per ``(key, header)`` pair.

        Missing keys render as empty cells.
        """
        table = Table(*(header for _, header in columns), title=title, header_style="bold")
        for row in rows:
            table.add_row(*(_cell(row.get(key)) for key, _ in columns))
        self._out.print(table)

    def fields(self, values: Mapping[str, Any], *, title: str, subtitle: str | None = None) -> None:
        """Render a labelled record in a panel. Empty values are left out."""
        lines = [f"[cyan]{label}:[/cyan] {value}" for label, value in values.items() if _cell(value)]
        body = "\n".join(lines) or "[dim]No details available[/dim]"
        self._out.print(
            Panel(body, title=f"[bold]{title}[/bold]", subtitle=subtitle, border_style="blue", padding=(1, 2))
        )

    def progress(self) -> Progress:
        """Percentage bar for batch operations; cleared afterwards when not on a terminal."""
        return Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=self._out,
            transient=not self._out.is_terminal,
        )


def _cell(value: Any) -> str:
    if value is None or value == {}:
        return ""
    return str(value)


_console: Console | None = None


def get_console() -> Console:
    global _console
    if _console is None:
        _console = Console()
    return _console
