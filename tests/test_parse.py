# SPDX-License-Identifier: MIT

import datetime

import pytest
import typer

from gridcal.model.calendar_config import Weekday
from gridcal.terminal.parse import parse_color, parse_offset, parse_weekday


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("monday", Weekday.MONDAY),
        ("Sun", Weekday.SUNDAY),
        (" saturday ", Weekday.SATURDAY),
        ("7", Weekday.SUNDAY),
        ("1", Weekday.MONDAY),
    ],
)
def test_parse_weekday(value, expected):
    assert parse_weekday(value) == expected


@pytest.mark.parametrize("value", ["funday", "0", "8", ""])
def test_parse_weekday_rejects_garbage(value):
    with pytest.raises(typer.BadParameter):
        parse_weekday(value)


def test_parse_weekday_none():
    assert parse_weekday(None) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1:30", datetime.timedelta(hours=1, minutes=30)),
        ("-0:15", datetime.timedelta(minutes=-15)),
        ("48:00", datetime.timedelta(days=2)),
    ],
)
def test_parse_offset(value, expected):
    assert parse_offset(value) == expected


@pytest.mark.parametrize("value", ["90", "1:60", "1h", "-:30"])
def test_parse_offset_rejects_garbage(value):
    with pytest.raises(typer.BadParameter):
        parse_offset(value)


def test_parse_color():
    assert parse_color("bright_red") == "bright_red"
    assert parse_color("#a0c4ff") == "#a0c4ff"
    assert parse_color(None) is None


def test_parse_color_rejects_garbage():
    with pytest.raises(typer.BadParameter):
        parse_color("not-a-color")
