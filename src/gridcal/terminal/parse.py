# SPDX-License-Identifier: MIT

import datetime
import re
from typing import Optional

import pendulum
import typer
from rich.color import Color, ColorParseError

from gridcal.model.calendar_config import Weekday
from gridcal.time import datetime_from_str_utc, duration_from_str


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        return pendulum_date_time.in_tz("UTC")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        days_offset = int(datetime)
        pendulum_date_time = pendulum.today().add(days=days_offset).start_of("day")
        return pendulum_date_time.in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now().in_tz("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today().start_of("day").in_tz("UTC")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday().start_of("day").in_tz("UTC")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow().start_of("day").in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def parse_weekday(weekday_param: Optional[str]) -> Optional[Weekday]:
    if weekday_param is None:
        return None
    try:
        return Weekday.from_str(weekday_param)
    except ValueError:
        raise typer.BadParameter(
            f"Expected a weekday name (monday, mon) or ISO number 1-7, got '{weekday_param}'"
        )


def parse_offset(offset_param: Optional[str]) -> Optional[datetime.timedelta]:
    if offset_param is None:
        return None
    if not re.match(r"^-?\d{1,4}:[0-5]\d$", offset_param):
        raise typer.BadParameter(
            f"Offset must be in [-]H:mm format (e.g., 1:30 or -0:15), got '{offset_param}'"
        )
    return duration_from_str(offset_param)


def parse_color(color_param: Optional[str]) -> Optional[str]:
    if color_param is None:
        return None
    try:
        Color.parse(color_param)
    except ColorParseError:
        raise typer.BadParameter(
            f"Expected a color name (blue, bright_red) or hex (#a0c4ff), got '{color_param}'"
        )
    return color_param
