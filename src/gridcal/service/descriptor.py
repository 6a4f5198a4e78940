# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum
from loguru import logger

from gridcal.color import (
    HIGH_CONTRAST_TEXT_COLOR,
    ColorCache,
    background_color,
    resolve_event_color,
)
from gridcal.model.descriptor import (
    DescriptorKind,
    EventDescriptor,
    SegmentedEventWrapper,
    SingleDayDescriptor,
)
from gridcal.model.entity_id import generate_descriptor_id
from gridcal.model.event import Event
from gridcal.repository.edit_session import EDIT_SESSION_REPO, EditSessionRepository
from gridcal.service.bucket import event_end
from gridcal.time import elapsed


def new_segmented_wrapper(
    event: Event,
    partial_start: Optional[pendulum.DateTime] = None,
    partial_end: Optional[pendulum.DateTime] = None,
    color_cache: Optional[ColorCache] = None,
) -> SegmentedEventWrapper:
    """Wrap ``event`` for display through a partial interval.

    Without explicit bounds the wrapper covers the whole event. Events with
    only a color seed take their color from ``color_cache``.
    """
    color = resolve_event_color(event, color_cache)
    return {
        "id": generate_descriptor_id(),
        "kind": DescriptorKind.SEGMENTED,
        "event": event,
        "partial_start": partial_start if partial_start is not None else event["start"],
        "partial_end": partial_end if partial_end is not None else event_end(event),
        "color": color,
        "background_color": background_color(color),
        "text_color": HIGH_CONTRAST_TEXT_COLOR,
        "edited_event": None,
    }


def new_single_day_descriptor(
    event: Event, color_cache: Optional[ColorCache] = None
) -> SingleDayDescriptor:
    color = resolve_event_color(event, color_cache)
    return {
        "id": generate_descriptor_id(),
        "kind": DescriptorKind.SINGLE_DAY,
        "event": event,
        "start": event["start"],
        "end": event_end(event),
        "color": color,
        "background_color": background_color(color),
        "text_color": HIGH_CONTRAST_TEXT_COLOR,
        "edited_event": None,
    }


def date_interval(
    descriptor: EventDescriptor,
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    match descriptor["kind"]:
        case DescriptorKind.SEGMENTED:
            wrapper = cast(SegmentedEventWrapper, descriptor)
            return wrapper["partial_start"], wrapper["partial_end"]
        case DescriptorKind.SINGLE_DAY:
            single = cast(SingleDayDescriptor, descriptor)
            return single["start"], single["end"]


def set_date_interval(
    descriptor: EventDescriptor, start: pendulum.DateTime, end: pendulum.DateTime
) -> None:
    if end < start:
        raise ValueError("interval end must not be before its start")
    match descriptor["kind"]:
        case DescriptorKind.SEGMENTED:
            wrapper = cast(SegmentedEventWrapper, descriptor)
            wrapper["partial_start"] = start
            wrapper["partial_end"] = end
        case DescriptorKind.SINGLE_DAY:
            single = cast(SingleDayDescriptor, descriptor)
            single["start"] = start
            single["end"] = end


def descriptor_text(descriptor: EventDescriptor) -> str:
    title = descriptor["event"]["title"]
    if title is None or title == "":
        return "[no title]"
    return title


def is_all_day(descriptor: EventDescriptor) -> bool:
    return descriptor["event"]["all_day"]


def make_editable(
    descriptor: EventDescriptor,
    sessions: EditSessionRepository = EDIT_SESSION_REPO,
) -> EventDescriptor:
    """
    Begin an edit session on ``descriptor``.

    Returns a draft sharing the same source event and bounds. Changes to the
    draft stay there until ``commit_editing`` is called on the original.
    """
    draft = cast(EventDescriptor, dict(descriptor))
    draft["id"] = generate_descriptor_id()
    draft["edited_event"] = descriptor["id"]
    sessions.open_session(descriptor["id"], draft)
    return draft


def commit_editing(
    descriptor: EventDescriptor,
    sessions: EditSessionRepository = EDIT_SESSION_REPO,
) -> bool:
    """
    Apply the open draft of ``descriptor`` onto it and close the session.

    Returns:
        True if a commit happened. False, with nothing changed, when there is
        no open draft or the draft is of a different kind.
    """
    draft = sessions.get_draft(descriptor["id"])
    if (
        draft is None
        or draft["edited_event"] != descriptor["id"]
        or draft["kind"] != descriptor["kind"]
    ):
        logger.debug(f"No draft to commit for descriptor {descriptor['id']}")
        return False

    match descriptor["kind"]:
        case DescriptorKind.SEGMENTED:
            _commit_segmented(
                cast(SegmentedEventWrapper, descriptor),
                cast(SegmentedEventWrapper, draft),
            )
        case DescriptorKind.SINGLE_DAY:
            _commit_single_day(
                cast(SingleDayDescriptor, descriptor),
                cast(SingleDayDescriptor, draft),
            )

    sessions.close_session(descriptor["id"])
    return True


def discard_editing(
    descriptor: EventDescriptor,
    sessions: EditSessionRepository = EDIT_SESSION_REPO,
) -> bool:
    return sessions.close_session(descriptor["id"]) is not None


def _commit_segmented(
    wrapper: SegmentedEventWrapper, draft: SegmentedEventWrapper
) -> None:
    """Shift the event by how far the draft's partial start moved, keeping its duration."""
    event = wrapper["event"]
    duration = elapsed(event["start"], event_end(event))
    displacement = elapsed(wrapper["partial_start"], draft["partial_start"])

    wrapper["partial_start"] = draft["partial_start"]
    wrapper["partial_end"] = draft["partial_end"]

    # All-day events keep their absolute bounds
    if not event["all_day"]:
        new_start = event["start"] + displacement
        event["start"] = new_start
        # An open end follows the start on its own
        if event["end"] is not None:
            event["end"] = new_start + duration


def _commit_single_day(single: SingleDayDescriptor, draft: SingleDayDescriptor) -> None:
    single["start"] = draft["start"]
    single["end"] = draft["end"]
    single["event"]["start"] = draft["start"]
    single["event"]["end"] = draft["end"]
