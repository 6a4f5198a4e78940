# SPDX-License-Identifier: MIT

import atexit

from gridcal.repository.configuration import CONFIGURATION_REPO
from gridcal.repository.edit_session import EDIT_SESSION_REPO
from gridcal.repository.event import EVENT_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    EVENT_REPO.flush()
    # Uncommitted drafts do not outlive the process
    EDIT_SESSION_REPO.clear()


def register_cleanup() -> None:
    atexit.register(flush)
