# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from gridcal.color import ColorCache
from gridcal.model.calendar_config import CalendarConfig
from gridcal.model.event import Event
from gridcal.service.bucket import index_by_id
from gridcal.service.grid import generate_week
from gridcal.service.segment import segments_by_day
from gridcal.time import day_key_for_date, to_calendar_date
from gridcal.view.header import header
from gridcal.view.month import render_day_cell


def calendar_week_view(
    events_by_day: dict[pendulum.DateTime, list[Event]],
    config: CalendarConfig,
    date: Optional[pendulum.DateTime] = None,
    cell_width: int = 20,
    color_cache: Optional[ColorCache] = None,
) -> None:
    """Display one week as seven columns listing every event slice of each day."""
    tz = config["timezone"]
    reference = to_calendar_date(date if date is not None else pendulum.now(tz), tz)

    console = Console()
    week = generate_week(reference, config)
    if len(week) == 0:
        header("week")
        console.print("[red]Cannot display this week[/red]")
        return

    header(
        "week", f"{week[0].format('YYYY-MM-DD')} - {week[-1].format('YYYY-MM-DD')}"
    )

    events_by_id = index_by_id(events_by_day)
    segments = segments_by_day(list(events_by_id.values()), week, config)
    today = pendulum.now(tz).date()

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day in week:
        table.add_column(day.format("ddd MMM D"), style="bold", width=cell_width)
    table.add_row(
        *(
            render_day_cell(
                day,
                day,
                today,
                segments.get(day_key_for_date(day, tz), []),
                events_by_id,
                cell_width,
                color_cache,
                tz,
                max_segments=None,
            )
            for day in week
        )
    )

    console.print(table)
    console.print()
