# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from gridcal.color import ColorCache
from gridcal.model.calendar_config import CalendarConfig, Weekday
from gridcal.repository.configuration import CONFIGURATION_REPO
from gridcal.repository.event import EVENT_REPO
from gridcal.service.bucket import (
    day_range,
    fetch_events_by_day,
    fetch_events_by_day_for_week,
    fetch_events_by_day_for_year,
)
from gridcal.service.grid import generate_month_grid
from gridcal.terminal.parse import parse_datetime, parse_weekday
from gridcal.view.day import calendar_day_view
from gridcal.view.month import calendar_month_view, calendar_year_view
from gridcal.view.week import calendar_week_view


def _calendar_config(first_day: Optional[Weekday] = None) -> CalendarConfig:
    try:
        calendar_config = CONFIGURATION_REPO.get_calendar_config()
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1)
    if first_day is not None:
        calendar_config["first_day_of_week"] = first_day
    return calendar_config


def _color_cache() -> ColorCache:
    return ColorCache(seed=CONFIGURATION_REPO.get_config()["color_seed"])


def month(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--date",
            "-d",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    first_day: Annotated[
        Optional[str],
        typer.Option(
            "--first-day",
            "-f",
            help="first day of the week, overrides the configured one",
        ),
    ] = None,
    cell_width: Annotated[
        int,
        typer.Option(
            "--cell-width",
            "-w",
            help="Width of each day cell in characters",
        ),
    ] = 20,
    calendars: Annotated[
        Optional[list[str]],
        typer.Option("--calendar", "-c", help="only these calendars (repeatable)"),
    ] = None,
) -> None:
    """Show a month as a 6x7 grid."""
    calendar_config = _calendar_config(parse_weekday(first_day))
    reference = date if date is not None else pendulum.now(calendar_config["timezone"])

    # Out of range months have no grid and nothing to fetch
    events_by_day = (
        fetch_events_by_day(
            EVENT_REPO, reference, calendar_config, calendars, include_filler_days=True
        )
        if len(generate_month_grid(reference, calendar_config)) > 0
        else {}
    )

    calendar_month_view(
        events_by_day,
        calendar_config,
        date=reference,
        cell_width=cell_width,
        color_cache=_color_cache(),
    )


def year(
    year: Annotated[
        Optional[int],
        typer.Option("--year", "-y", help="year to display (defaults to this year)"),
    ] = None,
    first_day: Annotated[
        Optional[str],
        typer.Option(
            "--first-day",
            "-f",
            help="first day of the week, overrides the configured one",
        ),
    ] = None,
    calendars: Annotated[
        Optional[list[str]],
        typer.Option("--calendar", "-c", help="only these calendars (repeatable)"),
    ] = None,
) -> None:
    """Show the twelve months of a year."""
    calendar_config = _calendar_config(parse_weekday(first_day))
    if year is None:
        year = pendulum.now(calendar_config["timezone"]).year

    events_by_day = fetch_events_by_day_for_year(
        EVENT_REPO, year, calendar_config, calendars, include_filler_days=True
    )

    calendar_year_view(events_by_day, calendar_config, year=year, color_cache=_color_cache())


def day(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--date",
            "-d",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    calendars: Annotated[
        Optional[list[str]],
        typer.Option("--calendar", "-c", help="only these calendars (repeatable)"),
    ] = None,
) -> None:
    """List the events of one day, multi-day events clipped to the day."""
    calendar_config = _calendar_config()
    reference = date if date is not None else pendulum.now(calendar_config["timezone"])

    range_start, range_end = day_range(reference, calendar_config)
    events = EVENT_REPO.fetch_events(range_start, range_end, calendars)

    calendar_day_view(
        events, calendar_config, date=reference, color_cache=_color_cache()
    )


def week(
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--date",
            "-d",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    first_day: Annotated[
        Optional[str],
        typer.Option(
            "--first-day",
            "-f",
            help="first day of the week, overrides the configured one",
        ),
    ] = None,
    cell_width: Annotated[
        int,
        typer.Option(
            "--cell-width",
            "-w",
            help="Width of each day column in characters",
        ),
    ] = 20,
    calendars: Annotated[
        Optional[list[str]],
        typer.Option("--calendar", "-c", help="only these calendars (repeatable)"),
    ] = None,
) -> None:
    """Show the seven days of a week side by side."""
    calendar_config = _calendar_config(parse_weekday(first_day))
    reference = date if date is not None else pendulum.now(calendar_config["timezone"])

    events_by_day = fetch_events_by_day_for_week(
        EVENT_REPO, reference, calendar_config, calendars
    )

    calendar_week_view(
        events_by_day,
        calendar_config,
        date=reference,
        cell_width=cell_width,
        color_cache=_color_cache(),
    )
