from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from trollpad.domain.models import UnsavedChoice
from trollpad.services.ui.ports.messages import IMessageService


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def info(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.information(parent, title, text)

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    def ask_unsaved(self, parent: Any | None, title: str, text: str) -> UnsavedChoice:
        buttons = (
            QMessageBox.StandardButton.Save
            | QMessageBox.StandardButton.Discard
            | QMessageBox.StandardButton.Cancel
        )
        resp = QMessageBox.warning(
            parent, title, text, buttons, QMessageBox.StandardButton.Save
        )
        if resp == QMessageBox.StandardButton.Save:
            return UnsavedChoice.SAVE
        if resp == QMessageBox.StandardButton.Discard:
            return UnsavedChoice.DISCARD
        # Escape / window close come back as Cancel
        return UnsavedChoice.CANCEL
