# SPDX-License-Identifier: MIT

from typing import Optional

from loguru import logger

from gridcal.model.descriptor import EventDescriptor
from gridcal.model.entity_id import DescriptorId


class EditSessionRepository:
    """
    Open edit sessions, keyed by the id of the descriptor being edited.

    The repository is the only owner of a draft. The draft refers back to its
    original through ``edited_event``, which is an id, so neither side keeps
    the other alive.
    """

    def __init__(self) -> None:
        self._drafts: dict[DescriptorId, EventDescriptor] = {}

    def open_session(self, original_id: DescriptorId, draft: EventDescriptor) -> None:
        if original_id in self._drafts:
            logger.debug(f"Replacing open draft for descriptor {original_id}")
        self._drafts[original_id] = draft

    def get_draft(self, original_id: DescriptorId) -> Optional[EventDescriptor]:
        return self._drafts.get(original_id)

    def close_session(self, original_id: DescriptorId) -> Optional[EventDescriptor]:
        return self._drafts.pop(original_id, None)

    def has_session(self, original_id: DescriptorId) -> bool:
        return original_id in self._drafts

    def clear(self) -> None:
        self._drafts.clear()

    def __len__(self) -> int:
        return len(self._drafts)


EDIT_SESSION_REPO = EditSessionRepository()
