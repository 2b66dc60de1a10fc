"""Clone command.

Clears the destination directory, then clones a repository into it.
"""

from typing import Annotated

import typer

from clonectl.cli.display import create_report_table, print_report_summary
from clonectl.clone import CloneError, CloneStrategy, GitCloner, parse_repository
from clonectl.core.config import ConfigError, load_config_or_default
from clonectl.core.log import get_removal_sink
from clonectl.removal import PathProbe, RemovalError
from clonectl.utils.formatting import console, print_error, print_info, print_success


def clone(
    repository: Annotated[
        str,
        typer.Argument(help="Repository URL (https:// or git@)."),
    ],
    directory: Annotated[
        str | None,
        typer.Argument(help="Destination directory. Defaults to the repository name."),
    ] = None,
    branch: Annotated[
        str | None,
        typer.Option("--branch", "-b", help="Branch to check out."),
    ] = None,
    strategy: Annotated[
        CloneStrategy | None,
        typer.Option(
            "--strategy",
            "-s",
            help="How git is launched.",
            case_sensitive=False,
        ),
    ] = None,
    timeout: Annotated[
        int | None,
        typer.Option("--timeout", "-t", help="Seconds to wait for git.", min=1),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation when the destination exists."),
    ] = False,
    details: Annotated[
        bool,
        typer.Option("--details", "-d", help="List every leaf removed before cloning."),
    ] = False,
) -> None:
    """Clone a repository into a freshly cleared directory.

    An existing destination is removed completely first. Options not
    given on the command line fall back to ~/.config/clonectl/config.toml.

    Examples:
        clonectl clone https://github.com/owner/repo.git
        clonectl clone git@github.com:owner/repo.git dest -b develop
        clonectl clone https://github.com/owner/repo -s wrapper
    """
    try:
        config = load_config_or_default()
        address = parse_repository(repository)
    except (ConfigError, CloneError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    destination = directory or address.name

    if not yes and PathProbe().exists(destination):
        confirmed = typer.confirm(
            f"{destination} already exists and will be removed. Continue?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    cloner = GitCloner(
        strategy or config.strategy,
        git=config.git,
        timeout=timeout or config.timeout_seconds,
    )

    try:
        result = cloner.clone(
            repository,
            destination,
            branch or config.branch,
            sink=get_removal_sink(),
        )
    except RemovalError as e:
        print_error(f"Could not clear {e.path}: {e}")
        raise typer.Exit(code=1) from e
    except CloneError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if result.removal.existed:
        if details:
            console.print(create_report_table(result.removal))
        print_report_summary(result.removal)

    print_success(f"Cloned {address.slug}")
    console.print(f"  [muted]Source:[/muted]    {result.repository}")
    console.print(f"  [muted]Directory:[/muted] {result.directory}")
    console.print(f"  [muted]Branch:[/muted]    {result.branch or '[warning]HEAD[/warning]'}")
    console.print(f"  [muted]Strategy:[/muted]  {result.strategy.value}")
