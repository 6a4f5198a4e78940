# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from gridcal import configuration
from gridcal.model.calendar_config import CalendarConfig, Weekday


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: fill in any setting added after the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]
                self.is_dirty = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_calendar_config(self) -> CalendarConfig:
        """Build the calendar settings used by grid and bucketing code.

        Raises:
            ValueError: If the weekday or timezone setting is not recognized
        """
        timezone = self.config["timezone"]
        try:
            pendulum.now(timezone)
        except (ValueError, KeyError) as e:
            raise ValueError(f"Unknown timezone: {timezone!r}") from e
        return {
            "first_day_of_week": Weekday.from_str(self.config["first_day_of_week"]),
            "timezone": timezone,
        }

    def update_config(
        self,
        show_header: Optional[bool] = None,
        first_day_of_week: Optional[Weekday] = None,
        timezone: Optional[str] = None,
        random_color_for_events: Optional[bool] = None,
        color_seed: Optional[int] = None,
        remove_color_seed: bool = False,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if first_day_of_week is not None:
            self.config["first_day_of_week"] = first_day_of_week.name.lower()
        if timezone is not None:
            self.config["timezone"] = timezone
        if random_color_for_events is not None:
            self.config["random_color_for_events"] = random_color_for_events
        if color_seed is not None:
            self.config["color_seed"] = color_seed
        if remove_color_seed:
            self.config["color_seed"] = None
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
