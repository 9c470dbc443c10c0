"""Shared utility functions for cxx-skeleton.

Provides Rich-based console reporting and the small file-system helpers the
generator needs.  Warnings and errors go to stderr, everything else to
stdout.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_text_file(path: str | Path, content: str) -> Path:
    """Create parent dirs and write *content*, replacing any existing file."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


def list_directory_entries(path: str | Path) -> list[str]:
    """Return the sorted names of every entry in *path*, hidden ones included.

    ``Path.iterdir`` never yields ``.`` or ``..``.
    """
    return sorted(entry.name for entry in Path(path).iterdir())


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(
        f"[bold red]Error:[/bold red] {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )


def print_warning(message: str) -> None:
    """Print a yellow warning message on stderr."""
    err_console.print(
        f"[bold yellow]Warning:[/bold yellow] {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )
