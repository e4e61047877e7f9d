from __future__ import annotations

import logging
from collections.abc import Callable

from trollpad.domain.models import EditKind
from trollpad.services.edit_events import EditEventStream

logger = logging.getLogger(__name__)


class DirtyTracker:
    """
    Unsaved-changes flag driven purely by edit events.

    Every observed edit marks the document dirty, even one that puts the text back
    to what was last saved; only new/open/save clear it.
    """

    def __init__(self) -> None:
        self._dirty = False
        self._listeners: list[Callable[[bool], None]] = []

    def is_dirty(self) -> bool:
        return self._dirty

    def mark_dirty(self) -> None:
        self._set(True)

    def mark_clean(self) -> None:
        self._set(False)

    def add_listener(self, listener: Callable[[bool], None]) -> Callable[[], None]:
        """Called with the new flag on every clean/dirty transition."""
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def attach(self, events: EditEventStream) -> Callable[[], None]:
        return events.subscribe(self._on_edit)

    def _on_edit(self, _kind: EditKind) -> None:
        self.mark_dirty()

    def _set(self, dirty: bool) -> None:
        if self._dirty == dirty:
            return
        self._dirty = dirty
        logger.debug("document is now %s", "dirty" if dirty else "clean")
        for listener in list(self._listeners):
            listener(dirty)
