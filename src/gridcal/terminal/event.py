# SPDX-License-Identifier: MIT

import datetime
from typing import Annotated, Optional

import pendulum
import typer

from gridcal.color import ColorCache, get_random_color
from gridcal.repository.configuration import CONFIGURATION_REPO
from gridcal.repository.event import EVENT_REPO
from gridcal.service.descriptor import (
    commit_editing,
    date_interval,
    discard_editing,
    make_editable,
    new_segmented_wrapper,
    set_date_interval,
)
from gridcal.template.event import get_event_template
from gridcal.terminal.custom_typer import AliasedTyperGroup
from gridcal.terminal.parse import parse_color, parse_datetime, parse_offset
from gridcal.time import elapsed
from gridcal.view import event as event_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(help="event title")],
    calendar: Annotated[Optional[str], typer.Option("--calendar", "-c")] = None,
    color: Annotated[
        Optional[str],
        typer.Option("--color", "-col", parser=parse_color, help="Rich color name or hex"),
    ] = None,
    color_seed: Annotated[
        Optional[str],
        typer.Option(
            "--color-seed",
            help="stable key for a remembered random color, e.g. a person's id",
        ),
    ] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--start",
            "-s",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD HH:mm, YYYY-MM-DD, (H)H:mm, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--end",
            "-e",
            parser=parse_datetime,
            help="valid inputs: YYYY-MM-DD HH:mm, YYYY-MM-DD, (H)H:mm, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    all_day: Annotated[bool, typer.Option("--all-day", "-a")] = False,
) -> None:
    config = CONFIGURATION_REPO.get_config()

    # Determine color: use provided color, or random if config enabled
    event_color = color
    if event_color is None and color_seed is None and config["random_color_for_events"]:
        event_color = get_random_color()

    event = get_event_template()
    event["title"] = title
    event["calendar"] = calendar
    event["color"] = event_color
    event["color_seed"] = color_seed
    if start is not None:
        event["start"] = start.in_tz("UTC")
    elif all_day:
        # For all-day events without explicit start, use midnight of current day in local timezone
        event["start"] = pendulum.now("local").start_of("day").in_tz("UTC")
    if end is not None:
        event["end"] = end.in_tz("UTC")
    elif all_day:
        event["end"] = event["start"].add(days=1)
    event["all_day"] = all_day

    try:
        id = EVENT_REPO.save_new_event(event)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    event_report.single_event_view(EVENT_REPO.get_event(id))


@app.command("list, ls")
def list_events(
    include_deleted: Annotated[
        bool, typer.Option("--include-deleted", "-i", help="Include deleted events")
    ] = False,
    no_color: Annotated[bool, typer.Option("--no-color", "-nc")] = False,
) -> None:
    events = sorted(
        EVENT_REPO.get_all_events(include_deleted=include_deleted),
        key=lambda event: event["start"],
    )
    event_report.events_view(
        "events",
        events,
        use_color=not no_color,
        color_cache=ColorCache(seed=CONFIGURATION_REPO.get_config()["color_seed"]),
    )


@app.command("show, sh", no_args_is_help=True)
def show(id: Annotated[str, typer.Argument(help="event id")]) -> None:
    try:
        event = EVENT_REPO.get_event(id)
    except KeyError:
        typer.echo(f"Error: no event with id {id}", err=True)
        raise typer.Exit(1)
    event_report.single_event_view(event)


@app.command("move, mv", no_args_is_help=True)
def move(
    id: Annotated[str, typer.Argument(help="event id")],
    by: Annotated[
        Optional[datetime.timedelta],
        typer.Option(
            "--by",
            "-b",
            parser=parse_offset,
            help="shift by [-]H:mm, e.g. 1:30 or -0:15",
        ),
    ] = None,
    to: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--to",
            "-t",
            parser=parse_datetime,
            help="new start: YYYY-MM-DD HH:mm, YYYY-MM-DD, (H)H:mm, today, or day offset",
        ),
    ] = None,
) -> None:
    """Move an event, keeping its duration."""
    if (by is None) == (to is None):
        typer.echo("Error: pass exactly one of --by or --to", err=True)
        raise typer.Exit(1)

    try:
        event = EVENT_REPO.get_event(id)
    except KeyError:
        typer.echo(f"Error: no event with id {id}", err=True)
        raise typer.Exit(1)

    wrapper = new_segmented_wrapper(event)
    draft = make_editable(wrapper)
    draft_start, draft_end = date_interval(draft)
    shift = by if by is not None else elapsed(draft_start, to)  # type: ignore[arg-type]
    set_date_interval(draft, draft_start + shift, draft_end + shift)
    if event["all_day"]:
        discard_editing(wrapper)
        typer.echo("All-day events keep their dates; nothing was moved.")
        return
    commit_editing(wrapper)

    EVENT_REPO.modify_event(id, start=event["start"], end=event["end"])
    event_report.single_event_view(EVENT_REPO.get_event(id))


@app.command("delete, del", no_args_is_help=True)
def delete(id: Annotated[str, typer.Argument(help="event id")]) -> None:
    try:
        EVENT_REPO.delete_event(id)
    except KeyError:
        typer.echo(f"Error: no event with id {id}", err=True)
        raise typer.Exit(1)
    event_report.single_event_view(EVENT_REPO.get_event(id))
