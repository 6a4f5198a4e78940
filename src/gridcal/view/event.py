# SPDX-License-Identifier: MIT

from typing import Any, Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gridcal.color import ColorCache, background_color, resolve_event_color
from gridcal.model.event import Event
from gridcal.service.bucket import event_end
from gridcal.time import datetime_to_display_local_datetime_str, elapsed
from gridcal.view.header import header

EVENT_LIST_COLUMNS = ("id", "title", "calendar", "start", "end", "all_day")


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, pendulum.DateTime):
        return datetime_to_display_local_datetime_str(value)
    return str(value)


def events_view(
    report_name: str,
    events: list[Event],
    columns: tuple[str, ...] = EVENT_LIST_COLUMNS,
    use_color: bool = True,
    color_cache: Optional[ColorCache] = None,
) -> None:
    header(report_name, f"{len(events)} events")

    events_table = Table(box=box.SIMPLE)
    for column in columns:
        events_table.add_column(column, no_wrap=column == "id")

    for event in events:
        style = resolve_event_color(event, color_cache) if use_color else ""
        events_table.add_row(
            *(Text(_format_value(event.get(column)), style=style) for column in columns)
        )

    Console().print(events_table)


def single_event_view(event: Event, color_cache: Optional[ColorCache] = None) -> None:
    header("event", event["title"] or "[no title]")

    color = resolve_event_color(event, color_cache)
    duration = elapsed(event["start"], event_end(event))

    event_table = Table(box=box.SIMPLE, show_header=False)
    event_table.add_column("property", style="bold")
    event_table.add_column("value")

    for field in ("id", "calendar", "color_seed", "start", "end", "all_day"):
        event_table.add_row(field, _format_value(event[field]))  # type: ignore[literal-required]
    event_table.add_row("duration", str(duration))
    event_table.add_row(
        "color", Text(f" {color} ", style=f"black on {background_color(color)}")
    )
    for field in ("created", "updated", "deleted"):
        event_table.add_row(field, _format_value(event[field]))  # type: ignore[literal-required]

    Console().print(event_table)
