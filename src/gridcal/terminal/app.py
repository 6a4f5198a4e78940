# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from gridcal.terminal import configuration, event, view
from gridcal.terminal.custom_typer import RootTyperGroup
from gridcal.view.header import set_show_header

app = typer.Typer(
    cls=RootTyperGroup,
    help="gridcal - Month grids and multi-day events in the terminal",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.add_typer(event.app, name="event, e")
app.command(name="month, m")(view.month)
app.command(name="week, w")(view.week)
app.command(name="year, y")(view.year)
app.command(name="day, d")(view.day)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    gridcal - Month grids and multi-day events in the terminal

    Global options that apply to all commands.
    """
    if no_header:
        set_show_header(False)


def run() -> None:
    app()
