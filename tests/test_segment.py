# SPDX-License-Identifier: MIT

import datetime

import pendulum

from gridcal.color import DEFAULT_EVENT_COLOR, ColorCache, resolve_event_color
from gridcal.model.descriptor import DescriptorKind
from gridcal.service.descriptor import date_interval
from gridcal.service.grid import generate_month_grid
from gridcal.service.segment import (
    descriptors_for_day,
    overlaps_day,
    segment_for_day,
    segments_by_day,
    split_event_by_days,
)


def test_multi_day_event_is_clipped_to_each_day(utc_config, make_event):
    event = make_event(pendulum.datetime(2020, 4, 1, 22), pendulum.datetime(2020, 4, 3, 2))
    grid = generate_month_grid(datetime.date(2020, 4, 1), utc_config)

    segments = segments_by_day([event], grid, utc_config)

    assert list(segments) == [
        pendulum.datetime(2020, 4, 1),
        pendulum.datetime(2020, 4, 2),
        pendulum.datetime(2020, 4, 3),
    ]
    first, middle, last = (segments[key][0] for key in segments)
    assert (first["visible_start"], first["visible_end"]) == (
        pendulum.datetime(2020, 4, 1, 22),
        pendulum.datetime(2020, 4, 2),
    )
    assert (middle["visible_start"], middle["visible_end"]) == (
        pendulum.datetime(2020, 4, 2),
        pendulum.datetime(2020, 4, 3),
    )
    assert (last["visible_start"], last["visible_end"]) == (
        pendulum.datetime(2020, 4, 3),
        pendulum.datetime(2020, 4, 3, 2),
    )
    assert all(
        segment["owner_event_id"] == event["id"]
        for day_segments in segments.values()
        for segment in day_segments
    )


def test_event_ending_at_midnight_does_not_spill_over(make_event):
    event = make_event(pendulum.datetime(2020, 4, 1, 20), pendulum.datetime(2020, 4, 2))

    assert segment_for_day(event, pendulum.datetime(2020, 4, 2)) is None
    assert segment_for_day(event, pendulum.datetime(2020, 4, 1)) is not None


def test_unsaved_event_has_no_segment(make_event):
    event = make_event(pendulum.datetime(2020, 4, 1, 9), id=None)

    assert segment_for_day(event, pendulum.datetime(2020, 4, 1)) is None


def test_zero_length_event_at_midnight(make_event):
    midnight = pendulum.datetime(2020, 4, 2)
    event = make_event(midnight, midnight)

    segment = segment_for_day(event, midnight)

    assert segment is not None
    assert segment["visible_start"] == segment["visible_end"] == midnight
    assert segment_for_day(event, pendulum.datetime(2020, 4, 1)) is None


def test_day_clipping_follows_calendar_days_across_dst(utc_config, make_event):
    utc_config["timezone"] = "Europe/Amsterdam"
    # Clocks go forward on this day, it lasts 23 hours
    day_start = pendulum.datetime(2021, 3, 28, tz="Europe/Amsterdam")
    event = make_event(day_start, pendulum.datetime(2021, 3, 30, tz="Europe/Amsterdam"))

    segment = segment_for_day(event, day_start)

    assert segment is not None
    assert segment["visible_end"] == pendulum.datetime(2021, 3, 29, tz="Europe/Amsterdam")
    assert (segment["visible_end"] - segment["visible_start"]).total_seconds() == 23 * 3600


def test_overlaps_day(utc_config, make_event):
    event = make_event(pendulum.datetime(2020, 4, 1, 9), pendulum.datetime(2020, 4, 2, 9))

    assert overlaps_day(event, datetime.date(2020, 4, 1), utc_config)
    assert overlaps_day(event, datetime.date(2020, 4, 2), utc_config)
    assert not overlaps_day(event, datetime.date(2020, 4, 3), utc_config)


def test_split_event_by_days(utc_config, make_event):
    event = make_event(pendulum.datetime(2020, 4, 1, 22), pendulum.datetime(2020, 4, 3, 2))

    wrappers = split_event_by_days(
        event, pendulum.datetime(2020, 4, 1), pendulum.datetime(2020, 5, 1), utc_config
    )

    assert [(w["partial_start"], w["partial_end"]) for w in wrappers] == [
        (pendulum.datetime(2020, 4, 1, 22), pendulum.datetime(2020, 4, 2)),
        (pendulum.datetime(2020, 4, 2), pendulum.datetime(2020, 4, 3)),
        (pendulum.datetime(2020, 4, 3), pendulum.datetime(2020, 4, 3, 2)),
    ]
    assert all(wrapper["event"] is event for wrapper in wrappers)
    assert len({wrapper["id"] for wrapper in wrappers}) == 3


def test_split_event_by_days_clips_to_range(utc_config, make_event):
    event = make_event(pendulum.datetime(2020, 3, 30, 12), pendulum.datetime(2020, 4, 2, 12))

    wrappers = split_event_by_days(
        event, pendulum.datetime(2020, 4, 1), pendulum.datetime(2020, 5, 1), utc_config
    )

    assert wrappers[0]["partial_start"] == pendulum.datetime(2020, 4, 1)
    assert len(wrappers) == 2


def test_split_event_outside_range_is_empty(utc_config, make_event):
    event = make_event(pendulum.datetime(2020, 3, 1, 9))

    assert (
        split_event_by_days(
            event, pendulum.datetime(2020, 4, 1), pendulum.datetime(2020, 5, 1), utc_config
        )
        == []
    )


def test_descriptors_for_day(utc_config, make_event):
    short = make_event(pendulum.datetime(2020, 4, 2, 9), pendulum.datetime(2020, 4, 2, 10))
    long = make_event(pendulum.datetime(2020, 4, 1, 9), pendulum.datetime(2020, 4, 4, 9))
    other_day = make_event(pendulum.datetime(2020, 4, 5, 9))

    descriptors = descriptors_for_day([short, long, other_day], datetime.date(2020, 4, 2), utc_config)

    assert len(descriptors) == 2
    whole, clipped = descriptors
    assert whole["kind"] == DescriptorKind.SINGLE_DAY
    assert whole["event"] is short
    assert date_interval(whole) == (short["start"], short["end"])
    assert clipped["kind"] == DescriptorKind.SEGMENTED
    assert clipped["event"] is long
    assert clipped["partial_start"] == pendulum.datetime(2020, 4, 2)
    assert clipped["partial_end"] == pendulum.datetime(2020, 4, 3)


def test_day_descriptors_use_seeded_colors(utc_config, make_event):
    cache = ColorCache(seed=5)
    short = make_event(
        pendulum.datetime(2020, 4, 2, 9), pendulum.datetime(2020, 4, 2, 10), color_seed="standup"
    )
    long = make_event(
        pendulum.datetime(2020, 4, 1, 9), pendulum.datetime(2020, 4, 4, 9), color_seed="offsite"
    )

    whole, clipped = descriptors_for_day([short, long], datetime.date(2020, 4, 2), utc_config, cache)

    assert whole["color"] == resolve_event_color(short, cache)
    assert clipped["color"] == resolve_event_color(long, cache)
    assert whole["color"] != DEFAULT_EVENT_COLOR
    assert clipped["color"] != DEFAULT_EVENT_COLOR


def test_day_descriptors_without_cache_fall_back_to_default(utc_config, make_event):
    event = make_event(pendulum.datetime(2020, 4, 2, 9), color_seed="standup")

    (descriptor,) = descriptors_for_day([event], datetime.date(2020, 4, 2), utc_config)

    assert descriptor["color"] == DEFAULT_EVENT_COLOR


def test_split_event_colors_every_slice_alike(utc_config, make_event):
    cache = ColorCache(seed=9)
    event = make_event(
        pendulum.datetime(2020, 4, 1, 22), pendulum.datetime(2020, 4, 3, 2), color_seed="trip"
    )

    slices = split_event_by_days(
        event, pendulum.datetime(2020, 4, 1), pendulum.datetime(2020, 4, 4), utc_config, cache
    )

    assert len(slices) == 3
    assert {wrapper["color"] for wrapper in slices} == {cache.color_for("trip")}
