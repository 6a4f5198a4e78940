# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from gridcal.model.entity_id import EntityId

EVENT_ENTITY_TYPE = "event"


class Event(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    title: Optional[str]
    calendar: Optional[str]
    color: Optional[str]
    color_seed: Optional[str]
    start: pendulum.DateTime
    end: Optional[pendulum.DateTime]
    all_day: bool
    created: pendulum.DateTime
    updated: pendulum.DateTime
    deleted: Optional[pendulum.DateTime]
