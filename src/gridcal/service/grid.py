# SPDX-License-Identifier: MIT

import datetime

import pendulum
from loguru import logger

from gridcal.model.calendar_config import CalendarConfig, Weekday
from gridcal.time import to_calendar_date

GRID_ROWS = 6
GRID_COLUMNS = 7
GRID_CELLS = GRID_ROWS * GRID_COLUMNS


def leading_days(day: datetime.date, first_day_of_week: Weekday) -> int:
    """Number of days between the start of the week and ``day``, such as the
    filler days shown before the first day of the month."""
    return (day.isoweekday() - first_day_of_week + 7) % 7


def generate_month_grid(
    reference: datetime.date | datetime.datetime, config: CalendarConfig
) -> list[pendulum.Date]:
    """
    Return the 42 consecutive days of a 6x7 month view.

    The grid starts on the configured first day of the week, so the first
    of the month lands in the column for its weekday. Days of the previous
    and next month fill the leading and trailing cells.

    Args:
        reference: Any day or instant inside the month to display
        config: Calendar settings (first day of week, timezone)

    Returns:
        42 dates, or an empty list if the grid falls outside the supported
        date range. Callers must not index into an empty grid.
    """
    try:
        first_of_month = to_calendar_date(reference, config["timezone"]).start_of(
            "month"
        )
        offset = leading_days(first_of_month, config["first_day_of_week"])
        start_date = first_of_month.subtract(days=offset)
        return [start_date.add(days=i) for i in range(GRID_CELLS)]
    except (ValueError, OverflowError) as e:
        logger.warning(f"Cannot build month grid for {reference}: {e}")
        return []


def grid_weeks(grid: list[pendulum.Date]) -> list[list[pendulum.Date]]:
    return [grid[i : i + GRID_COLUMNS] for i in range(0, len(grid), GRID_COLUMNS)]


def weekday_headers(first_day_of_week: Weekday) -> list[str]:
    """Abbreviated day names, starting from the configured first day."""
    return [
        Weekday((first_day_of_week - 1 + i) % 7 + 1).abbreviation
        for i in range(GRID_COLUMNS)
    ]


def is_in_month(day: datetime.date, reference_month: datetime.date) -> bool:
    return day.year == reference_month.year and day.month == reference_month.month


def generate_year_grids(year: int, config: CalendarConfig) -> list[list[pendulum.Date]]:
    """One month grid per month of ``year``, January first."""
    return [
        generate_month_grid(pendulum.Date(year, month, 1), config)
        for month in range(1, 13)
    ]


def generate_week(
    reference: datetime.date | datetime.datetime, config: CalendarConfig
) -> list[pendulum.Date]:
    """The seven days of the week containing ``reference``, starting on the
    configured first day. Empty if the week falls outside the supported range.
    """
    try:
        day = to_calendar_date(reference, config["timezone"])
        start_date = day.subtract(days=leading_days(day, config["first_day_of_week"]))
        return [start_date.add(days=i) for i in range(GRID_COLUMNS)]
    except (ValueError, OverflowError) as e:
        logger.warning(f"Cannot build week for {reference}: {e}")
        return []
