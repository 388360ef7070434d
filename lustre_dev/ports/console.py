"""Console port for progress and error output."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Port for everything the preview command shows the user."""

    def print(self, message: str, style: str | None = None) -> None:
        """Print a line, optionally wrapped in a markup style."""
        ...

    def print_error(self, message: str) -> None:
        """Print a one-line error headline."""
        ...

    def print_success(self, message: str) -> None:
        """Print a completed step marker."""
        ...

    def print_panel(self, content: str, title: str | None = None) -> None:
        """Print a boxed block of text.

        Args:
            content: Multi-line body, printed verbatim
            title: Optional title shown in the border
        """
        ...
