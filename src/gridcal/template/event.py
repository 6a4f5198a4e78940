# SPDX-License-Identifier: MIT

from gridcal.model.event import EVENT_ENTITY_TYPE, Event
from gridcal.time import now_utc


def get_event_template() -> Event:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EVENT_ENTITY_TYPE,
        "title": None,
        "calendar": None,
        "color": None,
        "color_seed": None,
        "start": now,
        "end": None,
        "all_day": False,
        "created": now,
        "updated": now,
        "deleted": None,
    }
