"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from clonectl import __version__
from clonectl.cli.commands import clone, config, remove
from clonectl.core.log import configure_logging

# Create main Typer app
app = typer.Typer(
    name="clonectl",
    help="Clear a destination completely, then clone a git repository into it.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"clonectl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every entry as it is removed.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log errors.",
        ),
    ] = False,
) -> None:
    """clonectl - Clear a destination completely, then clone into it."""
    configure_logging(verbose=verbose, quiet=quiet)


# Register commands
app.command(name="remove")(remove.remove)
app.command(name="clone")(clone.clone)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
