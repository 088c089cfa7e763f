"""Console output for CLI commands."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

from workspace_fs.config import Settings
from workspace_fs.types import NodeInfo, NodeKind


class Output:
    """Rich-based output helpers used by the CLI."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {message}")

    def show_listing(self, path: str, entries: list[Path]) -> None:
        """Display a one-level directory listing.

        Args:
            path: Listed path, used as the table title.
            entries: Entries returned by the operator.
        """
        if not entries:
            self.console.print(f"[yellow]Nothing found at {path}[/yellow]")
            return

        table = Table(title=path)
        table.add_column("Name", style="cyan")
        table.add_column("Type")
        for entry in entries:
            kind = "dir" if entry.is_dir() else "file"
            table.add_row(entry.name or str(entry), kind)
        self.console.print(table)

    def show_node(self, info: NodeInfo) -> None:
        """Display a node description."""
        if info.kind is NodeKind.ABSENT:
            self.console.print(f"[yellow]{info.path}[/yellow]: absent")
            return
        size = f" ({info.size} bytes)" if info.kind is NodeKind.FILE else ""
        self.console.print(f"[cyan]{info.path}[/cyan]: {info.kind.value}{size}")

    def show_settings(self, settings: Settings) -> None:
        """Display effective settings."""
        table = Table(title="Settings")
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        table.add_row("workspace.local", str(settings.workspace.local))
        table.add_row("workspace.remote", settings.workspace.remote or "-")
        table.add_row("backup-clean.max-backup-num", str(settings.backup_clean.max_backup_num))
        self.console.print(table)
