from __future__ import annotations

from .dialogs import IFileDialogService, IRetypeDialogService
from .messages import IMessageService

__all__ = [
    "IFileDialogService",
    "IMessageService",
    "IRetypeDialogService",
]
