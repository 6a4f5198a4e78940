# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Literal, Optional, TypeAlias, TypedDict

import pendulum

from gridcal.model.entity_id import DescriptorId
from gridcal.model.event import Event


class DescriptorKind(Enum):
    SINGLE_DAY = "single_day"
    SEGMENTED = "segmented"


class SingleDayDescriptor(TypedDict):
    """A renderable event whose interval is the event's own interval."""

    id: DescriptorId
    kind: Literal[DescriptorKind.SINGLE_DAY]
    event: Event
    start: pendulum.DateTime
    end: pendulum.DateTime
    color: str
    background_color: str
    text_color: str
    edited_event: Optional[DescriptorId]


class SegmentedEventWrapper(TypedDict):
    """
    One real event displayed through a partial interval.

    A multi-day event is drawn as several wrappers sharing the same ``event``,
    each with the partial start/end of the day it covers. ``edited_event`` is
    set only on drafts and holds the id of the wrapper being edited.
    """

    id: DescriptorId
    kind: Literal[DescriptorKind.SEGMENTED]
    event: Event
    partial_start: pendulum.DateTime
    partial_end: pendulum.DateTime
    color: str
    background_color: str
    text_color: str
    edited_event: Optional[DescriptorId]


EventDescriptor: TypeAlias = SingleDayDescriptor | SegmentedEventWrapper
