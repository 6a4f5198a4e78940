# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def to_calendar_date(
    value: datetime.date | datetime.datetime, tz: str
) -> pendulum.Date:
    """Return the calendar day of ``value`` as seen from timezone ``tz``.

    Instants are converted into ``tz`` first; plain dates are taken as-is.
    Naive datetimes are interpreted as UTC, the way pendulum does.
    """
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value).in_tz(tz).date()
    return pendulum.Date(value.year, value.month, value.day)


def start_of_day(value: pendulum.DateTime, tz: str) -> pendulum.DateTime:
    return value.in_tz(tz).start_of("day")


def day_key_for_date(day: datetime.date, tz: str) -> pendulum.DateTime:
    """Return the start-of-day instant of ``day`` in timezone ``tz``."""
    return pendulum.datetime(day.year, day.month, day.day, tz=tz)


def elapsed(start: pendulum.DateTime, end: pendulum.DateTime) -> datetime.timedelta:
    """Exact elapsed time between two instants as a plain timedelta.

    pendulum's Interval carries calendar components (months, years) which
    would be re-applied as calendar arithmetic when added back to an instant.
    """
    return datetime.timedelta(seconds=(end - start).total_seconds())


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime))
    pendulum_date_time = pendulum_date_time.set(tz="local")
    pendulum_date_time = pendulum_date_time.in_tz("UTC")
    return pendulum_date_time


def duration_from_str(duration: str) -> datetime.timedelta:
    """Parse ``[-]H:mm`` into a timedelta."""
    sign = -1 if duration.startswith("-") else 1
    hours, minutes = map(int, duration.lstrip("-").split(":"))
    return sign * datetime.timedelta(hours=hours, minutes=minutes)
