from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from trollpad.domain.interfaces import IFileService

LF = "\n"
CRLF = "\r\n"


def detect_newline(text: str) -> str:
    """CRLF if the text uses it anywhere, else LF."""
    return CRLF if CRLF in text else LF


def to_lf(text: str) -> str:
    return text.replace(CRLF, LF)


def apply_newline(text: str, newline: str) -> str:
    """Re-expand LF-only editor text to the file's line ending."""
    return text if newline == LF else to_lf(text).replace(LF, newline)


class FileService(IFileService):
    """Byte reads and atomic byte writes; text helpers encode/decode UTF-8 at this boundary."""

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_bytes_atomic(self, path: Path, data: bytes) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path} ({sf.errorString()})")
        if sf.write(data) != len(data):
            sf.cancelWriting()
            raise OSError(f"Short write to: {path} ({sf.errorString()})")
        if not sf.commit():
            raise OSError(f"Commit failed for: {path} ({sf.errorString()})")

    def read_text(self, path: Path) -> str:
        # undecodable bytes become U+FFFD instead of refusing the file
        return self.read_bytes(path).decode("utf-8", errors="replace")

    def write_text_atomic(self, path: Path, text: str) -> None:
        self.write_bytes_atomic(path, text.encode("utf-8"))
