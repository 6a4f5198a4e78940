# SPDX-License-Identifier: MIT

import pendulum
import pytest

from gridcal import configuration
from gridcal.repository.event import EventRepository
from gridcal.template.event import get_event_template


def new_event(start, end=None, **fields):
    event = get_event_template()
    event["start"] = start
    event["end"] = end
    event.update(fields)
    return event


def test_save_flush_and_reload(isolated_storage):
    repository = EventRepository()
    id = repository.save_new_event(
        new_event(
            pendulum.datetime(2020, 4, 1, 9),
            pendulum.datetime(2020, 4, 1, 10),
            title="standup",
            calendar="work",
        )
    )

    assert repository.flush()
    assert (configuration.DATA_EVENTS_DIR / f"{id}.yaml").is_file()

    reloaded = EventRepository().get_event(id)
    assert reloaded["title"] == "standup"
    assert reloaded["calendar"] == "work"
    assert reloaded["start"] == pendulum.datetime(2020, 4, 1, 9)
    assert reloaded["end"] == pendulum.datetime(2020, 4, 1, 10)
    assert reloaded["deleted"] is None


def test_flush_without_changes_writes_nothing(isolated_storage):
    repository = EventRepository()

    assert repository.get_all_events() == []
    assert not repository.flush()


def test_missing_data_directory_loads_empty(isolated_storage, monkeypatch):
    monkeypatch.setattr(
        configuration, "DATA_EVENTS_DIR", isolated_storage / "nowhere" / "events"
    )

    assert EventRepository().get_all_events() == []


def test_save_rejects_end_before_start(isolated_storage):
    repository = EventRepository()

    with pytest.raises(ValueError):
        repository.save_new_event(
            new_event(pendulum.datetime(2020, 4, 1, 10), pendulum.datetime(2020, 4, 1, 9))
        )


def test_get_event_returns_copy(isolated_storage):
    repository = EventRepository()
    id = repository.save_new_event(new_event(pendulum.datetime(2020, 4, 1, 9), title="a"))

    copy = repository.get_event(id)
    copy["title"] = "b"

    assert repository.get_event(id)["title"] == "a"


def test_unknown_id_raises_key_error(isolated_storage):
    with pytest.raises(KeyError):
        EventRepository().get_event("missing")


def test_modify_event(isolated_storage):
    repository = EventRepository()
    id = repository.save_new_event(
        new_event(pendulum.datetime(2020, 4, 1, 9), pendulum.datetime(2020, 4, 1, 10), color="red")
    )

    repository.modify_event(id, title="moved", start=pendulum.datetime(2020, 4, 2, 9), remove_color=True)

    event = repository.get_event(id)
    assert event["title"] == "moved"
    assert event["start"] == pendulum.datetime(2020, 4, 2, 9)
    assert event["color"] is None


def test_delete_is_soft(isolated_storage):
    repository = EventRepository()
    id = repository.save_new_event(new_event(pendulum.datetime(2020, 4, 1, 9)))

    repository.delete_event(id)

    assert repository.get_all_events() == []
    assert len(repository.get_all_events(include_deleted=True)) == 1
    assert repository.get_event(id)["deleted"] is not None


def test_fetch_events(isolated_storage):
    repository = EventRepository()
    work = repository.save_new_event(
        new_event(pendulum.datetime(2020, 4, 10, 9), calendar="work")
    )
    home = repository.save_new_event(
        new_event(pendulum.datetime(2020, 4, 11, 9), calendar="home")
    )
    repository.save_new_event(new_event(pendulum.datetime(2020, 6, 1, 9), calendar="work"))
    deleted = repository.save_new_event(new_event(pendulum.datetime(2020, 4, 12, 9)))
    repository.delete_event(deleted)

    april_start = pendulum.datetime(2020, 4, 1)
    april_end = pendulum.datetime(2020, 5, 1)

    assert [event["id"] for event in repository.fetch_events(april_start, april_end)] == [
        work,
        home,
    ]
    assert [
        event["id"] for event in repository.fetch_events(april_start, april_end, ["home"])
    ] == [home]
