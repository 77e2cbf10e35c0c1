"""Rich console output for the command-line interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from reliable_fs.types import PathComponents


class Output:
    """Text output for reliable-fs commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_components(self, path: str, components: PathComponents, kind: str) -> None:
        """Display the decomposition of a path.

        Args:
            path: Path as given by the user.
            components: Its decomposition.
            kind: Classification ("file", "directory" or "missing").
        """
        table = Table(title=path, show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("dirname", components.dirname)
        table.add_row("basename", components.basename)
        table.add_row("filename", components.filename)
        table.add_row("extension", components.extension or "[dim]none[/dim]")
        table.add_row("kind", kind)
        self.console.print(table)

    def show_json(self, text: str) -> None:
        """Print JSON text with highlighting."""
        self.console.print_json(text)

    def show_value(self, value: str) -> None:
        """Print a plain value without markup."""
        self.console.print(value, markup=False, highlight=False, soft_wrap=True)

    def show_success(self, message: str) -> None:
        """Display success message.

        Args:
            message: Message to display.
        """
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Display error message.

        Args:
            message: Message to display.
        """
        self.console.print(f"[red]✗[/red] {message}")
