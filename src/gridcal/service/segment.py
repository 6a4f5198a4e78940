# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

import pendulum

from gridcal.color import ColorCache
from gridcal.model.calendar_config import CalendarConfig
from gridcal.model.day_segment import DaySegment
from gridcal.model.descriptor import EventDescriptor, SegmentedEventWrapper
from gridcal.model.event import Event
from gridcal.service.bucket import event_end, intersects
from gridcal.service.descriptor import new_segmented_wrapper, new_single_day_descriptor
from gridcal.time import day_key_for_date, start_of_day


def segment_for_day(event: Event, day_key: pendulum.DateTime) -> Optional[DaySegment]:
    """
    Clip an event to one calendar day.

    Args:
        event: The event to clip
        day_key: Start-of-day instant of the day

    Returns:
        The visible part of the event on that day, or None if the event does
        not touch the day
    """
    next_day = day_key.add(days=1)
    if event["id"] is None or not intersects(event, day_key, next_day):
        return None
    return {
        "owner_event_id": event["id"],
        "day_key": day_key,
        "visible_start": max(event["start"], day_key),
        "visible_end": min(event_end(event), next_day),
    }


def overlaps_day(event: Event, day: datetime.date, config: CalendarConfig) -> bool:
    day_key = day_key_for_date(day, config["timezone"])
    return intersects(event, day_key, day_key.add(days=1))


def segments_by_day(
    events: list[Event], days: list[pendulum.Date], config: CalendarConfig
) -> dict[pendulum.DateTime, list[DaySegment]]:
    """
    Compute the per-day slices of every event across ``days``.

    Days without any segment are left out of the result.
    """
    segments: dict[pendulum.DateTime, list[DaySegment]] = {}
    for day in days:
        day_key = day_key_for_date(day, config["timezone"])
        for event in events:
            segment = segment_for_day(event, day_key)
            if segment is not None:
                segments.setdefault(day_key, []).append(segment)
    return segments


def split_event_by_days(
    event: Event,
    range_start: pendulum.DateTime,
    range_end: pendulum.DateTime,
    config: CalendarConfig,
    color_cache: Optional[ColorCache] = None,
) -> list[SegmentedEventWrapper]:
    """Cut the part of ``event`` inside [range_start, range_end) into one wrapper per day."""
    results: list[SegmentedEventWrapper] = []

    real_start = max(event["start"], range_start)
    real_end = min(event_end(event), range_end)
    if real_start >= real_end:
        return results

    current_start = real_start
    while current_start < real_end:
        next_day = start_of_day(current_start, config["timezone"]).add(days=1)
        piece_end = min(next_day, real_end)
        results.append(
            new_segmented_wrapper(event, current_start, piece_end, color_cache)
        )
        current_start = next_day

    return results


def descriptors_for_day(
    events: list[Event],
    day: datetime.date,
    config: CalendarConfig,
    color_cache: Optional[ColorCache] = None,
) -> list[EventDescriptor]:
    """
    Build the renderable descriptors of one day.

    Events that start and end on the same day get a single-day descriptor;
    longer events get a wrapper clipped to the day.
    """
    tz = config["timezone"]
    day_key = day_key_for_date(day, tz)

    descriptors: list[EventDescriptor] = []
    for event in events:
        if not overlaps_day(event, day, config):
            continue
        if start_of_day(event["start"], tz) == start_of_day(event_end(event), tz):
            descriptors.append(new_single_day_descriptor(event, color_cache))
        else:
            descriptors.extend(
                split_event_by_days(
                    event, day_key, day_key.add(days=1), config, color_cache
                )
            )
    return descriptors
