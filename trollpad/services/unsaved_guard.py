from __future__ import annotations

import logging
from typing import Any

from trollpad.domain.models import UnsavedChoice
from trollpad.services.dirty_tracker import DirtyTracker
from trollpad.services.save_gate import SaveGate
from trollpad.services.ui.ports.messages import IMessageService
from trollpad.utils.constants import UNSAVED_TEXT, UNSAVED_TITLE

logger = logging.getLogger(__name__)


class UnsavedChangeGuard:
    """Sits in front of new/open/close; True means the pending action may go ahead."""

    def __init__(
        self,
        *,
        tracker: DirtyTracker,
        save_gate: SaveGate,
        messages: IMessageService,
        parent: Any | None = None,
    ) -> None:
        self._tracker = tracker
        self._save_gate = save_gate
        self._messages = messages
        self._parent = parent

    def guard_destructive_action(self) -> bool:
        if not self._tracker.is_dirty():
            return True

        choice = self._messages.ask_unsaved(self._parent, UNSAVED_TITLE, UNSAVED_TEXT)
        logger.debug("Unsaved changes prompt answered: %s", choice.name)
        if choice is UnsavedChoice.SAVE:
            # a cancelled or rejected save keeps the action blocked
            return self._save_gate.request_save(False)
        if choice is UnsavedChoice.DISCARD:
            return True
        return False
