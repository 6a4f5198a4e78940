# SPDX-License-Identifier: MIT

import pytest
from yaml import dump, safe_load

from gridcal import configuration
from gridcal.model.calendar_config import Weekday
from gridcal.repository.configuration import ConfigurationRepository


def test_calendar_config_from_defaults(isolated_storage):
    calendar_config = ConfigurationRepository().get_calendar_config()

    assert calendar_config == {"first_day_of_week": Weekday.MONDAY, "timezone": "UTC"}


def test_update_and_flush(isolated_storage):
    repository = ConfigurationRepository()

    repository.update_config(first_day_of_week=Weekday.SUNDAY, color_seed=7, log_level="debug")
    assert repository.flush()

    stored = safe_load(configuration.APP_CONFIG_PATH.read_text())
    assert stored["first_day_of_week"] == "sunday"
    assert stored["color_seed"] == 7
    assert stored["log_level"] == "DEBUG"
    assert ConfigurationRepository().get_calendar_config()["first_day_of_week"] == Weekday.SUNDAY


def test_remove_flags(isolated_storage):
    repository = ConfigurationRepository()
    repository.update_config(color_seed=3, data_path="/tmp/somewhere")

    repository.update_config(remove_color_seed=True, remove_data_path=True)

    config = repository.get_config()
    assert config["color_seed"] is None
    assert config["data_path"] is None


def test_missing_keys_are_filled_in(isolated_storage):
    configuration.APP_CONFIG_PATH.write_text(dump({"show_header": False}))
    repository = ConfigurationRepository()

    config = repository.get_config()

    assert config["show_header"] is False
    assert config["first_day_of_week"] == "monday"
    assert repository.flush()


def test_unknown_timezone_is_rejected(isolated_storage):
    repository = ConfigurationRepository()
    repository.update_config(timezone="Mars/Olympus_Mons")

    with pytest.raises(ValueError):
        repository.get_calendar_config()


def test_unknown_weekday_is_rejected(isolated_storage):
    configuration.APP_CONFIG_PATH.write_text(
        dump({**configuration.get_default_configuration(), "first_day_of_week": "funday"})
    )

    with pytest.raises(ValueError):
        ConfigurationRepository().get_calendar_config()
