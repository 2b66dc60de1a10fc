"""Config commands.

Shows and initialises ~/.config/clonectl/config.toml.
"""

from typing import Annotated

import typer
from rich.table import Table

from clonectl.core.config import ClonectlConfig, ConfigError, load_config_or_default, save_config
from clonectl.core.paths import get_config_path
from clonectl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialise configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    path = get_config_path()
    try:
        config = load_config_or_default(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = str(path) if path.exists() else "defaults (no config file)"

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    for name, value in config.model_dump(mode="json").items():
        table.add_row(name, "[muted]-[/muted]" if value is None else str(value))

    console.print(table)
    console.print(f"[dim]Source: {source}[/dim]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = get_config_path()
    if path.exists() and not force:
        print_info(f"Config already exists: {path} (use --force to overwrite)")
        return

    try:
        saved = save_config(ClonectlConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
