from __future__ import annotations

import logging
from collections.abc import Callable

from trollpad.domain.models import EditKind

logger = logging.getLogger(__name__)

EditListener = Callable[[EditKind], None]


class EditEventStream:
    """
    Toolkit-neutral stream of content edits.

    The editing surface emits one event per insertion, deletion or bulk replace;
    subscribers only learn that a change happened, never what changed.
    """

    def __init__(self) -> None:
        self._listeners: list[EditListener] = []

    def subscribe(self, listener: EditListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, kind: EditKind) -> None:
        logger.debug("edit event: %s", kind.name)
        for listener in list(self._listeners):
            listener(kind)

    @staticmethod
    def classify(removed: int, added: int) -> EditKind | None:
        """Map a (chars removed, chars added) change to an edit kind; None for no-op notifications."""
        if removed and added:
            return EditKind.REPLACE
        if added:
            return EditKind.INSERT
        if removed:
            return EditKind.DELETE
        return None
