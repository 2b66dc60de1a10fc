"""Shared Rich display functions for removal reports.

Provides the audit-trail table and summary line printed by the remove
and clone commands.
"""

from rich.table import Table

from clonectl.removal.models import Entry, RemovalReport
from clonectl.utils.formatting import console


def create_report_table(report: RemovalReport) -> Table:
    """Create a Rich table listing every leaf the walk handled.

    Rows appear grouped by outcome: removed, retried, skipped, warning.

    Args:
        report: Removal report to display.

    Returns:
        Rich Table with Status, Path and Detail columns.
    """
    table = Table(
        title=f"Removal of {report.target}",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Path", no_wrap=True)
    table.add_column("Detail")

    for path in report.removed:
        table.add_row("[removed]removed[/removed]", path, "")
    for path in report.retried:
        table.add_row(
            "[retried]forced[/retried]", path, "[muted]permission denied, retried[/muted]"
        )
    for path in report.skipped:
        table.add_row("[skipped]gone[/skipped]", path, "[muted]already removed[/muted]")
    for warning in report.warnings:
        table.add_row("[warning]WARN[/warning]", warning.path, f"[muted]{warning.message}[/muted]")

    return table


def create_plan_table(target: str, entries: list[Entry]) -> Table:
    """Create a Rich table of the top-level entries a removal would start from.

    Args:
        target: Path that would be removed.
        entries: Top-level entries of the target.

    Returns:
        Rich Table with Kind and Path columns.
    """
    table = Table(
        title=f"Would remove {target} (Dry Run)",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Kind", width=10)
    table.add_column("Path", no_wrap=True)

    for entry in entries:
        table.add_row(entry.kind.value, entry.path)

    return table


def print_report_summary(report: RemovalReport) -> None:
    """Print a one-line summary of a removal report.

    Args:
        report: Removal report to summarise.
    """
    if not report.existed:
        console.print(f"[muted]{report.target} does not exist, nothing to remove.[/muted]")
        return

    parts = [f"{len(report.removed)} removed"]
    if report.retried:
        parts.append(f"{len(report.retried)} forced")
    if report.skipped:
        parts.append(f"{len(report.skipped)} already gone")
    if report.warnings:
        parts.append(f"[warning]{len(report.warnings)} warning(s)[/warning]")

    console.print(f"[success]Removed {report.target}[/success] [muted]({', '.join(parts)})[/muted]")
