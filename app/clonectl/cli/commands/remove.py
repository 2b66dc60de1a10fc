"""Remove command.

Destroys one or more paths completely, reporting every leaf removed.
"""

from pathlib import Path
from typing import Annotated

import typer

from clonectl.cli.display import create_plan_table, create_report_table, print_report_summary
from clonectl.core.log import get_removal_sink
from clonectl.removal import FinalizeError, ListingError, Remover
from clonectl.utils.formatting import console, print_error, print_info


def remove(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Paths to remove."),
    ],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    details: Annotated[
        bool,
        typer.Option("--details", "-d", help="List every leaf handled."),
    ] = False,
) -> None:
    """Remove each path and everything beneath it.

    Paths that do not exist are skipped. Leaves that cannot be removed
    individually are reported as warnings and purged at the end.

    Examples:
        clonectl remove build/            # Remove after confirmation
        clonectl remove -y a/ b/          # No prompt
        clonectl remove --dry-run build/  # Only list top-level entries
    """
    remover = Remover(sink=get_removal_sink())

    if dry_run:
        for path in paths:
            try:
                entries = remover.plan(path)
            except ListingError as e:
                print_error(str(e))
                raise typer.Exit(code=1) from e
            if not entries and not path.exists():
                print_info(f"{path} does not exist.")
                continue
            console.print(create_plan_table(str(path), entries))
        return

    if not yes:
        confirmed = typer.confirm(
            f"Remove {len(paths)} path(s) and everything beneath them?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    failed = False
    for path in paths:
        try:
            report = remover.remove(path)
        except ListingError as e:
            print_error(f"Could not enumerate {e.path}: {e}")
            failed = True
            continue
        except FinalizeError as e:
            print_error(f"Could not destroy {e.path}: {e}")
            failed = True
            continue

        if details and report.existed:
            console.print(create_report_table(report))
        print_report_summary(report)

    if failed:
        raise typer.Exit(code=1)
