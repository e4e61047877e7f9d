from __future__ import annotations

from .qt_dialogs import QtFileDialogService, QtRetypeDialogService
from .qt_edit_events import QtEditEventSource
from .qt_messages import QtMessageService

__all__ = [
    "QtEditEventSource",
    "QtFileDialogService",
    "QtMessageService",
    "QtRetypeDialogService",
]
