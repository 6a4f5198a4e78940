# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.table import Table

from gridcal import configuration
from gridcal.repository.configuration import CONFIGURATION_REPO
from gridcal.terminal.custom_typer import AliasedTyperGroup
from gridcal.terminal.parse import parse_weekday

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("first_day_of_week", config["first_day_of_week"])
    table.add_row("timezone", config["timezone"])
    table.add_row(
        "random_color_for_events",
        "✓ Enabled" if config["random_color_for_events"] else "✗ Disabled",
    )
    table.add_row(
        "color_seed",
        str(config["color_seed"]) if config["color_seed"] is not None else "None (random)",
    )
    table.add_row(
        "data_path",
        config["data_path"] or f"None (default: {configuration.DATA_PATH})",
    )
    table.add_row("log_level", config["log_level"])

    console.print(table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show or hide the report header",
        ),
    ] = None,
    first_day_of_week: Annotated[
        Optional[str],
        typer.Option(
            "--first-day-of-week",
            help="monday, tuesday, ... or ISO number 1-7",
        ),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option("--timezone", help="IANA timezone name, or 'local'"),
    ] = None,
    random_color_for_events: Annotated[
        Optional[bool],
        typer.Option(
            "--random-color-for-events/--no-random-color-for-events",
            help="Enable/disable random colors for new events",
        ),
    ] = None,
    color_seed: Annotated[
        Optional[int],
        typer.Option("--color-seed", help="Seed for remembered event colors"),
    ] = None,
    remove_color_seed: Annotated[
        bool, typer.Option("--remove-color-seed", help="Use unseeded colors")
    ] = False,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory path for storing event files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Reset data path to the default"),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Update configuration settings."""
    weekday = parse_weekday(first_day_of_week)
    if timezone is not None:
        try:
            pendulum.now(timezone)
        except (ValueError, KeyError):
            typer.echo(f"Error: unknown timezone {timezone!r}", err=True)
            raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        first_day_of_week=weekday,
        timezone=timezone,
        random_color_for_events=random_color_for_events,
        color_seed=color_seed,
        remove_color_seed=remove_color_seed,
        data_path=data_path,
        remove_data_path=remove_data_path,
        log_level=log_level,
    )

    Console().print("[green]Configuration updated successfully![/green]")
    view()
