"""Rich terminal output: entry lines, tables, hints."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vsdiff.git.models import ChangeRecord, ChangeStatus

_STATUS_STYLE = {
    "A": "green",
    "D": "red",
    "M": "yellow",
    "R": "cyan",
    "C": "cyan",
    "T": "magenta",
    "U": "bold red",
}


def format_entry(record: ChangeRecord) -> str:
    """``M path`` or ``R old -> new``."""
    if record.old_path == record.new_path:
        return f"{record.status} {record.old_path}"
    return f"{record.status} {record.old_path} -> {record.new_path}"


def print_entry(console: Console, record: ChangeRecord, prefix: str = "") -> None:
    style = _STATUS_STYLE.get(record.status, "white")
    console.print(f"{prefix}[{style}]{escape(format_entry(record))}[/{style}]")


def print_counts(console: Console, parsed: int, kept: int) -> None:
    console.print(f"entries: {parsed}, after excludes: {kept}")


def print_excluded(console: Console, excluded: Sequence[ChangeRecord]) -> None:
    console.print("Excluded entries:")
    for record in excluded:
        console.print(f"- {escape(format_entry(record))}", style="dim")


def print_staged_hint(console: Console, staged: Sequence[ChangeRecord]) -> None:
    console.print(f"[bold]staged entries: {len(staged)}[/bold] (use --staged)")
    for record in staged:
        print_entry(console, record, prefix="S ")


def render_table(console: Console, records: Sequence[ChangeRecord]) -> None:
    """Print *records* as a table, in order."""
    table = Table(title="Changes", title_style="bold", border_style="dim")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Status", justify="center")
    table.add_column("Old path", style="magenta")
    table.add_column("New path", style="magenta")

    for idx, record in enumerate(records):
        style = _STATUS_STYLE.get(record.status, "white")
        table.add_row(
            str(idx),
            f"[{style}]{escape(ChangeStatus.label(record.status))}[/{style}]",
            escape(record.old_path),
            escape(record.new_path) if record.is_move else "",
        )

    console.print(table)
