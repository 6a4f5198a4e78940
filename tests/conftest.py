# SPDX-License-Identifier: MIT

from typing import Any, Callable, Optional

import pendulum
import pytest
from yaml import dump

from gridcal import configuration
from gridcal.model.calendar_config import CalendarConfig, Weekday
from gridcal.model.entity_id import generate_entity_id
from gridcal.model.event import Event
from gridcal.repository.configuration import CONFIGURATION_REPO
from gridcal.repository.edit_session import EDIT_SESSION_REPO
from gridcal.repository.event import EVENT_REPO
from gridcal.template.event import get_event_template
from gridcal.view.header import set_show_header


@pytest.fixture
def utc_config() -> CalendarConfig:
    return {"first_day_of_week": Weekday.MONDAY, "timezone": "UTC"}


@pytest.fixture
def make_event() -> Callable[..., Event]:
    def _make_event(
        start: pendulum.DateTime,
        end: Optional[pendulum.DateTime] = None,
        **fields: Any,
    ) -> Event:
        event = get_event_template()
        event["id"] = generate_entity_id()
        event["start"] = start
        event["end"] = end
        event.update(fields)  # type: ignore[typeddict-item]
        return event

    return _make_event


@pytest.fixture(autouse=True)
def reset_state() -> Any:
    EDIT_SESSION_REPO.clear()
    set_show_header(True)
    yield
    EDIT_SESSION_REPO.clear()


@pytest.fixture
def isolated_storage(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> Any:
    """Point the config file and event store at a temporary directory."""
    config_path = tmp_path / "config"
    config_path.mkdir()
    data_path = tmp_path / "data"
    events_dir = data_path / "events"
    events_dir.mkdir(parents=True)

    app_config_path = config_path / "config.yaml"
    default_config = configuration.get_default_configuration()
    default_config["timezone"] = "UTC"
    app_config_path.write_text(dump(default_config))

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", app_config_path)
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_EVENTS_DIR", events_dir)

    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(EVENT_REPO, "_events", None)
    monkeypatch.setattr(EVENT_REPO, "is_dirty", False)
    monkeypatch.setattr(EVENT_REPO, "_dirty_ids", set())

    return tmp_path
