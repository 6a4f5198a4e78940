# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

import pendulum
from rich import box
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridcal.color import (
    FILLER_DAY_COLOR,
    TODAY_STYLE,
    WEEKEND_STYLE,
    ColorCache,
    resolve_event_color,
)
from gridcal.model.calendar_config import CalendarConfig
from gridcal.model.day_segment import DaySegment
from gridcal.model.entity_id import EntityId
from gridcal.model.event import Event
from gridcal.service.bucket import index_by_id
from gridcal.service.grid import (
    generate_month_grid,
    generate_year_grids,
    grid_weeks,
    is_in_month,
    weekday_headers,
)
from gridcal.service.segment import segments_by_day
from gridcal.time import day_key_for_date, to_calendar_date
from gridcal.view.header import header

MAX_SEGMENTS_PER_CELL = 3


def calendar_month_view(
    events_by_day: dict[pendulum.DateTime, list[Event]],
    config: CalendarConfig,
    date: Optional[pendulum.DateTime] = None,
    cell_width: int = 20,
    color_cache: Optional[ColorCache] = None,
) -> None:
    """
    Display a 6x7 month grid with the visible slice of each event per day.

    Args:
        events_by_day: Events bucketed by start day, usually the whole grid
            fetched from the store
        config: Calendar settings (first day of week, timezone)
        date: Any instant inside the month to display (defaults to now)
        cell_width: Width of each day cell in characters (defaults to 20)
        color_cache: Colors for events without a calendar color
    """
    tz = config["timezone"]
    reference = to_calendar_date(date if date is not None else pendulum.now(tz), tz)

    header("month", reference.format("MMMM YYYY"))

    console = Console()
    grid = generate_month_grid(reference, config)
    if len(grid) == 0:
        console.print("[red]Cannot display this month[/red]")
        return

    console.print(
        _render_month_grid(
            grid, reference, events_by_day, config, cell_width, color_cache
        )
    )
    console.print()


def calendar_year_view(
    events_by_day: dict[pendulum.DateTime, list[Event]],
    config: CalendarConfig,
    year: Optional[int] = None,
    color_cache: Optional[ColorCache] = None,
) -> None:
    """Display twelve compact month grids, marking days that have events."""
    tz = config["timezone"]
    if year is None:
        year = pendulum.now(tz).year

    header("year", str(year))
    events = list(index_by_id(events_by_day).values())

    panels: list[Panel] = []
    for month_index, grid in enumerate(generate_year_grids(year, config)):
        month_reference = pendulum.Date(year, month_index + 1, 1)
        if len(grid) == 0:
            continue
        segments = segments_by_day(events, grid, config)
        panels.append(
            Panel(
                _render_mini_month(grid, month_reference, segments, config),
                title=month_reference.format("MMMM"),
                box=box.ROUNDED,
            )
        )

    console = Console()
    console.print(Columns(panels))


def _render_month_grid(
    grid: list[pendulum.Date],
    reference: pendulum.Date,
    events_by_day: dict[pendulum.DateTime, list[Event]],
    config: CalendarConfig,
    cell_width: int,
    color_cache: Optional[ColorCache],
) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in weekday_headers(config["first_day_of_week"]):
        table.add_column(day_name, style="bold", width=cell_width)

    events_by_id = index_by_id(events_by_day)
    segments = segments_by_day(list(events_by_id.values()), grid, config)
    today = pendulum.now(config["timezone"]).date()

    for week in grid_weeks(grid):
        week_cells: list[Text] = []
        for day in week:
            day_key = day_key_for_date(day, config["timezone"])
            week_cells.append(
                render_day_cell(
                    day,
                    reference,
                    today,
                    segments.get(day_key, []),
                    events_by_id,
                    cell_width,
                    color_cache,
                    config["timezone"],
                )
            )
        table.add_row(*week_cells)

    return table


def render_day_cell(
    day: pendulum.Date,
    reference: pendulum.Date,
    today: datetime.date,
    day_segments: list[DaySegment],
    events_by_id: dict[EntityId, Event],
    cell_width: int,
    color_cache: Optional[ColorCache],
    tz: str,
    max_segments: Optional[int] = MAX_SEGMENTS_PER_CELL,
) -> Text:
    """Day number followed by one line per segment. Without ``max_segments``
    every segment is listed."""
    cell_content = Text()
    limit = len(day_segments) if max_segments is None else max_segments

    # Filler days from the neighbouring months are dimmed
    if not is_in_month(day, reference):
        cell_content.append(f"{day.day:2d}\n", style=FILLER_DAY_COLOR)
    elif day == today:
        cell_content.append(f"{day.day:2d}", style=TODAY_STYLE)
        cell_content.append("   \n", style=TODAY_STYLE)
    elif day.isoweekday() in (6, 7):
        cell_content.append(f"{day.day:2d}", style=WEEKEND_STYLE)
        cell_content.append("   \n", style=WEEKEND_STYLE)
    else:
        cell_content.append(f"{day.day:2d}\n", style="bold")

    for segment in day_segments[:limit]:
        event = events_by_id[segment["owner_event_id"]]
        color = resolve_event_color(event, color_cache)
        title = event["title"] or "[no title]"

        if event["all_day"]:
            marker = "■ "
            time_str = ""
        else:
            marker = "● "
            time_str = segment["visible_start"].in_tz(tz).format("HH:mm") + " "

        # Account for marker, time and truncation ellipsis
        max_title_len = cell_width - len(marker) - len(time_str)
        if len(title) > max_title_len:
            title = title[: max(max_title_len - 3, 0)] + "..."

        cell_content.append(marker, style=color)
        if time_str:
            cell_content.append(time_str, style="dim")
        cell_content.append(f"{title}\n", style=color)

    # Show count if more segments exist
    if len(day_segments) > limit:
        remaining = len(day_segments) - limit
        cell_content.append(f"  +{remaining} more\n", style="dim")

    return cell_content


def _render_mini_month(
    grid: list[pendulum.Date],
    reference: pendulum.Date,
    segments: dict[pendulum.DateTime, list[DaySegment]],
    config: CalendarConfig,
) -> Table:
    table = Table(box=None, show_header=True, padding=(0, 0))
    for day_name in weekday_headers(config["first_day_of_week"]):
        table.add_column(day_name[:2], justify="right", width=3)

    for week in grid_weeks(grid):
        row: list[Text] = []
        for day in week:
            if not is_in_month(day, reference):
                row.append(Text(f"{day.day}", style=FILLER_DAY_COLOR))
            elif day_key_for_date(day, config["timezone"]) in segments:
                row.append(Text(f"{day.day}", style="bold underline"))
            else:
                row.append(Text(f"{day.day}"))
        table.add_row(*row)

    return table
