"""Console adapter implementation using Rich library."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text


class ConsoleAdapter:
    """Rich console writing progress markers and error reports."""

    def __init__(self, console: Console | None = None):
        """Initialize console adapter.

        Args:
            console: Optional Rich console instance
        """
        self._console = console or Console()

    def print(self, message: str, style: str | None = None) -> None:
        if style:
            message = f"[{style}]{message}[/{style}]"
        self._console.print(message)

    def print_error(self, message: str) -> None:
        self._console.print(f"[red bold]Error:[/red bold] {message}")

    def print_success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {message}")

    def print_panel(self, content: str, title: str | None = None) -> None:
        # Explanations contain Gleam code like `App(Nil, [a])`; never parse markup.
        self._console.print(Panel(Text(content), title=title, box=box.ROUNDED, border_style="red"))
