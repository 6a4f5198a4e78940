# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from loguru import logger
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from gridcal import configuration, time
from gridcal.model.entity_id import EntityId, generate_entity_id
from gridcal.model.event import Event
from gridcal.service.bucket import intersects

# Stored as ISO-8601 strings
DATETIME_FIELDS = ("start", "end", "created", "updated", "deleted")


class EventRepository:
    def __init__(self) -> None:
        self._events: Optional[list[Event]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()

    @property
    def events(self) -> list[Event]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        self._events = []
        if not configuration.DATA_EVENTS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_EVENTS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_event = load(file_path.read_text(), Loader=Loader)
            if raw_event is not None:
                self._events.append(self.__convert_event_for_deserialization(raw_event))
        logger.debug(
            f"Loaded {len(self._events)} events from {configuration.DATA_EVENTS_DIR}"
        )

    def __save_data(self) -> None:
        configuration.DATA_EVENTS_DIR.mkdir(parents=True, exist_ok=True)
        for event in self.events:
            if event["id"] in self._dirty_ids:
                serializable_event = self.__convert_event_for_serialization(
                    deepcopy(event)
                )
                file_path = configuration.DATA_EVENTS_DIR / f"{event['id']}.yaml"
                file_path.write_text(dump(serializable_event, Dumper=Dumper))

        self._dirty_ids.clear()

    def flush(self) -> bool:
        if self._events is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_event_for_serialization(self, event: Event) -> dict[str, Any]:
        serializable_event = cast(dict[str, Any], event)
        for field in DATETIME_FIELDS:
            serializable_event[field] = time.datetime_to_iso_str_optional(
                serializable_event[field]
            )
        return serializable_event

    def __convert_event_for_deserialization(self, raw_event: dict[str, Any]) -> Event:
        for field in DATETIME_FIELDS:
            raw_event[field] = time.datetime_from_str_optional(raw_event.get(field))
        return cast(Event, raw_event)

    def __find(self, id: EntityId) -> Event:
        matching_events = [event for event in self.events if event["id"] == id]
        if len(matching_events) == 0:
            raise KeyError(id)
        return matching_events[0]

    def save_new_event(self, event: Event) -> EntityId:
        if event["end"] is not None and event["end"] < event["start"]:
            raise ValueError("event end must not be before its start")

        self.is_dirty = True

        event["id"] = generate_entity_id()
        self.events.append(event)
        self._dirty_ids.add(event["id"])

        return event["id"]

    def modify_event(
        self,
        id: EntityId,
        title: Optional[str] = None,
        calendar: Optional[str] = None,
        color: Optional[str] = None,
        color_seed: Optional[str] = None,
        start: Optional[pendulum.DateTime] = None,
        end: Optional[pendulum.DateTime] = None,
        all_day: Optional[bool] = None,
        deleted: Optional[pendulum.DateTime] = None,
        remove_color: bool = False,
        remove_end: bool = False,
        remove_deleted: bool = False,
    ) -> None:
        event = self.__find(id)

        self.is_dirty = True
        self._dirty_ids.add(id)

        # Set updated timestamp to current moment
        event["updated"] = time.now_utc()
        if title is not None:
            event["title"] = title
        if calendar is not None:
            event["calendar"] = calendar
        if color is not None:
            event["color"] = color
        if color_seed is not None:
            event["color_seed"] = color_seed
        if start is not None:
            event["start"] = start
        if end is not None:
            event["end"] = end
        if all_day is not None:
            event["all_day"] = all_day
        if deleted is not None:
            event["deleted"] = deleted

        if remove_color:
            event["color"] = None
        # Note: start cannot be removed as it's a required field
        if remove_end:
            event["end"] = None
        if remove_deleted:
            event["deleted"] = None

    def delete_event(self, id: EntityId) -> None:
        self.modify_event(id, deleted=time.now_utc())

    def get_all_events(self, include_deleted: bool = False) -> list[Event]:
        return deepcopy(
            [
                event
                for event in self.events
                if include_deleted or event["deleted"] is None
            ]
        )

    def get_event(self, id: EntityId) -> Event:
        return deepcopy(self.__find(id))

    def fetch_events(
        self,
        interval_start: pendulum.DateTime,
        interval_end: pendulum.DateTime,
        calendar_filter: Optional[list[str]] = None,
    ) -> list[Event]:
        """Return copies of all live events intersecting [interval_start, interval_end).

        Parameters:
            interval_start: Inclusive start of the range
            interval_end: Exclusive end of the range
            calendar_filter: Only events from these calendars, when given

        Returns:
            Matching events in storage order
        """
        return deepcopy(
            [
                event
                for event in self.events
                if event["deleted"] is None
                and (calendar_filter is None or event["calendar"] in calendar_filter)
                and intersects(event, interval_start, interval_end)
            ]
        )


EVENT_REPO = EventRepository()
