# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gridcal.color import ColorCache
from gridcal.model.calendar_config import CalendarConfig
from gridcal.model.event import Event
from gridcal.service.descriptor import date_interval, descriptor_text, is_all_day
from gridcal.service.segment import descriptors_for_day
from gridcal.time import to_calendar_date
from gridcal.view.header import header


def calendar_day_view(
    events: list[Event],
    config: CalendarConfig,
    date: Optional[pendulum.DateTime] = None,
    color_cache: Optional[ColorCache] = None,
) -> None:
    """
    Display the events of one day, each clipped to the part inside the day.

    All-day events are listed first, then timed events in start order.
    """
    tz = config["timezone"]
    day = to_calendar_date(date if date is not None else pendulum.now(tz), tz)

    header("day", day.format("YYYY-MM-DD ddd"))

    descriptors = sorted(
        descriptors_for_day(events, day, config, color_cache),
        key=lambda descriptor: (not is_all_day(descriptor), date_interval(descriptor)[0]),
    )

    table = Table(box=box.SIMPLE)
    table.add_column("time")
    table.add_column("event")

    for descriptor in descriptors:
        start, end = date_interval(descriptor)
        if is_all_day(descriptor):
            time_str = "all day"
        else:
            time_str = f"{start.in_tz(tz).format('HH:mm')}-{end.in_tz(tz).format('HH:mm')}"
        table.add_row(
            Text(time_str, style="dim"),
            Text(
                descriptor_text(descriptor),
                style=f"{descriptor['text_color']} on {descriptor['background_color']}",
            ),
        )

    console = Console()
    console.print(table)
