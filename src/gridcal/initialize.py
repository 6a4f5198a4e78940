# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from gridcal import configuration
from gridcal.log import setup_logger
from gridcal.repository.configuration import CONFIGURATION_REPO
from gridcal.view.header import set_show_header


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_file()

    configuration.load_data_path_configuration()
    configuration.DATA_EVENTS_DIR.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    setup_logger(config["log_level"])
    set_show_header(config["show_header"])


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.write_text(
            dump(configuration.get_default_configuration(), Dumper=Dumper)
        )
