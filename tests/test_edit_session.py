# SPDX-License-Identifier: MIT

import pendulum

from gridcal.repository.edit_session import EditSessionRepository
from gridcal.service.descriptor import new_segmented_wrapper


def test_session_lifecycle(make_event):
    sessions = EditSessionRepository()
    draft = new_segmented_wrapper(make_event(pendulum.datetime(2020, 4, 1, 9)))

    sessions.open_session("original", draft)

    assert sessions.has_session("original")
    assert sessions.get_draft("original") is draft
    assert sessions.close_session("original") is draft
    assert not sessions.has_session("original")
    assert sessions.close_session("original") is None


def test_clear_drops_all_drafts(make_event):
    sessions = EditSessionRepository()
    event = make_event(pendulum.datetime(2020, 4, 1, 9))
    sessions.open_session("a", new_segmented_wrapper(event))
    sessions.open_session("b", new_segmented_wrapper(event))

    sessions.clear()

    assert sessions.get_draft("a") is None
    assert sessions.get_draft("b") is None
