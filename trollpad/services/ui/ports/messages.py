from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from trollpad.domain.models import UnsavedChoice


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples business logic from Qt widgets.
    """

    def info(self, parent: Any | None, title: str, text: str) -> None: ...
    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def ask_unsaved(self, parent: Any | None, title: str, text: str) -> UnsavedChoice:
        """Blocking save/discard/cancel prompt. Dismissing the dialog counts as CANCEL."""
        ...
