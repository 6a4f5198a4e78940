# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "gridcal"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_EVENTS_DIR: Path = DATA_PATH / "events"


class Configuration(TypedDict):
    show_header: bool
    first_day_of_week: str
    timezone: str
    random_color_for_events: bool
    color_seed: Optional[int]
    data_path: Optional[str]
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "first_day_of_week": "monday",
        "timezone": "local",
        "random_color_for_events": False,
        "color_seed": None,
        "data_path": None,
        "log_level": "WARNING",
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the event
    store is first read.
    """
    global DATA_PATH, DATA_EVENTS_DIR

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_EVENTS_DIR = DATA_PATH / "events"
