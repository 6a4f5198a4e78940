# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from gridcal.model.entity_id import EntityId


class DaySegment(TypedDict):
    """The visible slice of one event on one calendar day."""

    owner_event_id: EntityId
    day_key: pendulum.DateTime
    visible_start: pendulum.DateTime
    visible_end: pendulum.DateTime
