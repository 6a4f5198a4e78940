# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, Protocol

import pendulum
from loguru import logger

from gridcal.model.calendar_config import CalendarConfig
from gridcal.model.entity_id import EntityId
from gridcal.model.event import Event
from gridcal.service.grid import generate_month_grid, generate_week, generate_year_grids
from gridcal.time import day_key_for_date, start_of_day, to_calendar_date


class EventStore(Protocol):
    def fetch_events(
        self,
        interval_start: pendulum.DateTime,
        interval_end: pendulum.DateTime,
        calendar_filter: Optional[list[str]] = None,
    ) -> list[Event]: ...


def event_end(event: Event) -> pendulum.DateTime:
    """The end of an event, treating an open end as one hour after the start."""
    if event["end"] is None:
        return event["start"].add(hours=1)
    return event["end"]


def intersects(
    event: Event, range_start: pendulum.DateTime, range_end: pendulum.DateTime
) -> bool:
    """Whether the event overlaps the closed-open range [range_start, range_end)."""
    start = event["start"]
    end = event_end(event)
    if end <= start:
        # Zero-length events are points in time
        return range_start <= start < range_end
    return start < range_end and end > range_start


def month_range(
    month_reference: datetime.date | datetime.datetime, config: CalendarConfig
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """[start of month, start of next month) in the calendar's timezone."""
    first_of_month = to_calendar_date(month_reference, config["timezone"]).start_of(
        "month"
    )
    start = pendulum.datetime(
        first_of_month.year, first_of_month.month, 1, tz=config["timezone"]
    )
    return start, start.add(months=1)


def year_range(
    year: int, config: CalendarConfig
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    start = pendulum.datetime(year, 1, 1, tz=config["timezone"])
    return start, start.add(years=1)


def day_range(
    day_reference: datetime.date | datetime.datetime, config: CalendarConfig
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """[start of day, start of next day) in the calendar's timezone."""
    day = to_calendar_date(day_reference, config["timezone"])
    start = day_key_for_date(day, config["timezone"])
    return start, start.add(days=1)


def bucket_range_by_day(
    events: list[Event],
    range_start: pendulum.DateTime,
    range_end: pendulum.DateTime,
    config: CalendarConfig,
) -> dict[pendulum.DateTime, list[Event]]:
    """
    Group the events overlapping [range_start, range_end) by the day they start.

    Keys are start-of-day instants in the calendar's timezone. Events keep the
    order they were given in within each bucket.
    """
    events_by_day: dict[pendulum.DateTime, list[Event]] = {}
    for event in events:
        if not intersects(event, range_start, range_end):
            continue
        day_key = start_of_day(event["start"], config["timezone"])
        events_by_day.setdefault(day_key, []).append(event)
    return events_by_day


def widen_to_days(
    range_start: pendulum.DateTime,
    range_end: pendulum.DateTime,
    days: list[pendulum.Date],
    config: CalendarConfig,
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """Grow [range_start, range_end) so it also covers the contiguous ``days``."""
    if len(days) == 0:
        return range_start, range_end
    first_day = day_key_for_date(days[0], config["timezone"])
    after_last_day = day_key_for_date(days[-1], config["timezone"]).add(days=1)
    return min(range_start, first_day), max(range_end, after_last_day)


def month_view_range(
    month_reference: datetime.date | datetime.datetime,
    config: CalendarConfig,
    include_filler_days: bool = False,
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """The month range, widened to the whole 6x7 grid when ``include_filler_days``."""
    range_start, range_end = month_range(month_reference, config)
    if include_filler_days:
        grid = generate_month_grid(month_reference, config)
        range_start, range_end = widen_to_days(range_start, range_end, grid, config)
    return range_start, range_end


def year_view_range(
    year: int, config: CalendarConfig, include_filler_days: bool = False
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    range_start, range_end = year_range(year, config)
    if include_filler_days:
        # January's leading and December's trailing filler days
        days = [day for grid in generate_year_grids(year, config) for day in grid]
        range_start, range_end = widen_to_days(range_start, range_end, days, config)
    return range_start, range_end


def bucket_by_day(
    events: list[Event],
    month_reference: datetime.date | datetime.datetime,
    config: CalendarConfig,
    include_filler_days: bool = False,
) -> dict[pendulum.DateTime, list[Event]]:
    range_start, range_end = month_view_range(
        month_reference, config, include_filler_days
    )
    return bucket_range_by_day(events, range_start, range_end, config)


def fetch_events_by_day(
    store: EventStore,
    month_reference: datetime.date | datetime.datetime,
    config: CalendarConfig,
    calendar_filter: Optional[list[str]] = None,
    include_filler_days: bool = False,
) -> dict[pendulum.DateTime, list[Event]]:
    """
    Fetch one month of events from the store and bucket them by start day.

    With ``include_filler_days`` the neighbouring months' days shown in the
    month grid are fetched too. The grid must not be empty in that case.
    """
    range_start, range_end = month_view_range(
        month_reference, config, include_filler_days
    )
    events = store.fetch_events(range_start, range_end, calendar_filter)
    logger.debug(
        f"Fetched {len(events)} events for {range_start.format('YYYY-MM-DD')}"
        f" to {range_end.format('YYYY-MM-DD')}"
    )
    return bucket_by_day(events, month_reference, config, include_filler_days)


def fetch_events_by_day_for_year(
    store: EventStore,
    year: int,
    config: CalendarConfig,
    calendar_filter: Optional[list[str]] = None,
    include_filler_days: bool = False,
) -> dict[pendulum.DateTime, list[Event]]:
    range_start, range_end = year_view_range(year, config, include_filler_days)
    events = store.fetch_events(range_start, range_end, calendar_filter)
    return bucket_range_by_day(events, range_start, range_end, config)


def fetch_events_by_day_for_week(
    store: EventStore,
    reference: datetime.date | datetime.datetime,
    config: CalendarConfig,
    calendar_filter: Optional[list[str]] = None,
) -> dict[pendulum.DateTime, list[Event]]:
    week = generate_week(reference, config)
    if len(week) == 0:
        return {}
    range_start = day_key_for_date(week[0], config["timezone"])
    range_end = day_key_for_date(week[-1], config["timezone"]).add(days=1)
    events = store.fetch_events(range_start, range_end, calendar_filter)
    return bucket_range_by_day(events, range_start, range_end, config)


def index_by_id(
    events_by_day: dict[pendulum.DateTime, list[Event]],
) -> dict[EntityId, Event]:
    events_by_id: dict[EntityId, Event] = {}
    for events in events_by_day.values():
        for event in events:
            if event["id"] is not None:
                events_by_id[event["id"]] = event
    return events_by_id
