# SPDX-License-Identifier: MIT

from enum import IntEnum
from typing import TypedDict


class Weekday(IntEnum):
    """ISO weekday numbering, matching ``datetime.date.isoweekday()``."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def abbreviation(self) -> str:
        return self.name[:3].capitalize()

    @classmethod
    def from_str(cls, value: str) -> "Weekday":
        """Accept a full name, a three letter abbreviation or an ISO number."""
        normalized = value.strip().lower()
        if normalized.isdigit():
            return cls(int(normalized))
        for weekday in cls:
            name = weekday.name.lower()
            if normalized == name or normalized == name[:3]:
                return weekday
        raise ValueError(f"Unknown weekday: {value!r}")


class CalendarConfig(TypedDict):
    first_day_of_week: Weekday
    timezone: str
