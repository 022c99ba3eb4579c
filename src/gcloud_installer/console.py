"""User-facing status output."""

from __future__ import annotations

from rich.console import Console


class StatusConsole:
    """Prints one-line status messages for the post-install hook."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the status console.

        Args:
            console: Rich console to print to. Defaults to stderr.
        """
        self.console = console or Console(stderr=True)

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {message}", highlight=False)

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {message}", highlight=False)

    def show_warning(self, message: str) -> None:
        """Show warning message.

        Args:
            message: Warning message.
        """
        self.console.print(f"[yellow]![/yellow] {message}", highlight=False)
