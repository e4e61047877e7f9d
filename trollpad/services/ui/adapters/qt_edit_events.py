from __future__ import annotations

from PyQt6.QtGui import QTextDocument

from trollpad.services.edit_events import EditEventStream


class QtEditEventSource:
    """Forwards QTextDocument.contentsChange into an EditEventStream."""

    def __init__(self, document: QTextDocument, stream: EditEventStream) -> None:
        self._stream = stream
        self._document = document
        document.contentsChange.connect(self._on_contents_change)

    @property
    def stream(self) -> EditEventStream:
        return self._stream

    def _on_contents_change(self, _position: int, removed: int, added: int) -> None:
        kind = EditEventStream.classify(removed, added)
        if kind is not None:
            self._stream.emit(kind)
