from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from trollpad.domain.interfaces import IFileService
from trollpad.domain.models import (
    Document,
    Mismatch,
    MismatchReport,
    SaveOutcome,
    SaveState,
)
from trollpad.services.comparator import compare, report_for
from trollpad.services.dirty_tracker import DirtyTracker
from trollpad.services.file_service import apply_newline
from trollpad.services.ui.ports.dialogs import IFileDialogService, IRetypeDialogService
from trollpad.services.ui.ports.messages import IMessageService
from trollpad.utils.constants import (
    DEFAULT_SAVE_NAME,
    FILE_FILTER,
    RETYPE_CANCELLED_NOTICE,
    RETYPE_PROMPT,
    RETYPE_TITLE,
)

logger = logging.getLogger(__name__)


class SaveGate:
    """
    Verification-gated save.

    IDLE -> AWAITING_RETYPE -> COMPARING -> SAVED | REJECTED | CANCELLED -> IDLE

    The text compared (and written) is the snapshot taken when the save was
    requested. Document path and dirty flag change only on SAVED.
    """

    def __init__(
        self,
        *,
        document: Document,
        text_source: Callable[[], str],
        tracker: DirtyTracker,
        files: IFileService,
        dialogs: IFileDialogService,
        retype: IRetypeDialogService,
        messages: IMessageService,
        parent: Any | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self._document = document
        self._text_source = text_source
        self._tracker = tracker
        self._files = files
        self._dialogs = dialogs
        self._retype = retype
        self._messages = messages
        self._parent = parent
        self._notify = notify

        self._state = SaveState.IDLE
        self.last_state: SaveState | None = None
        self.last_outcome: SaveOutcome | None = None
        self.last_report: MismatchReport | None = None

    @property
    def state(self) -> SaveState:
        return self._state

    def request_save(self, force_choose_target: bool = False) -> bool:
        """Run the whole workflow; True only if the file was written."""
        if self._state is not SaveState.IDLE:
            logger.warning("Save requested while another save is in progress (%s)", self._state)
            return False

        expected = self._text_source()
        self.last_report = None
        try:
            return self._run(expected, force_choose_target)
        finally:
            self._state = SaveState.IDLE

    # ---------- workflow steps ----------

    def _run(self, expected: str, force_choose_target: bool) -> bool:
        self._state = SaveState.AWAITING_RETYPE
        retyped = self._retype.prompt_retype(self._parent, RETYPE_TITLE, RETYPE_PROMPT)
        if retyped is None:
            self._finish(SaveState.CANCELLED, SaveOutcome.CANCELLED)
            if self._notify is not None:
                self._notify(RETYPE_CANCELLED_NOTICE)
            return False

        self._state = SaveState.COMPARING
        result = compare(expected, retyped)
        if isinstance(result, Mismatch):
            report = report_for(expected, retyped, result.locus)
            self.last_report = report
            logger.info("Save rejected: retyped text differs at index %d", report.locus)
            self._finish(SaveState.REJECTED, SaveOutcome.MISMATCH)
            self._messages.error(self._parent, "Error", report.message())
            return False

        target = self._resolve_target(force_choose_target)
        if target is None:
            logger.info("Save cancelled at target selection")
            self._finish(SaveState.CANCELLED, SaveOutcome.CANCELLED)
            return False

        try:
            self._files.write_text_atomic(target, apply_newline(expected, self._document.newline))
        except OSError as e:
            logger.warning("Failed to save %s: %s", target, e)
            self._finish(SaveState.REJECTED, SaveOutcome.IO_FAILURE)
            self._messages.error(self._parent, "Save Error", f"Failed to save file:\n{e}")
            return False

        self._document.path = target
        self._tracker.mark_clean()
        self._finish(SaveState.SAVED, SaveOutcome.SAVED)
        logger.info("Saved %d characters to %s", len(expected), target)
        self._messages.info(self._parent, "Info", f"Saved successfully to: {target.absolute()}")
        return True

    def _resolve_target(self, force_choose_target: bool) -> Path | None:
        current = self._document.path
        if current is not None and not force_choose_target:
            return current
        start = str(current) if current is not None else DEFAULT_SAVE_NAME
        return self._dialogs.get_save_file(self._parent, "Save As", start, FILE_FILTER)

    def _finish(self, state: SaveState, outcome: SaveOutcome) -> None:
        self._state = state
        self.last_state = state
        self.last_outcome = outcome
