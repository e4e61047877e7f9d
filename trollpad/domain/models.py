from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntFlag, auto
from pathlib import Path


@dataclass
class Document:
    """Save target of the single open document. The text itself lives in the editor.

    newline is the line ending the file was opened with (LF or CRLF); the editor holds LF only.
    """

    path: Path | None = None
    newline: str = "\n"

    @property
    def display_name(self) -> str:
        return self.path.name if self.path else "Untitled"


@dataclass(frozen=True)
class Identical:
    """Both buffers are equal code unit for code unit."""


@dataclass(frozen=True)
class Mismatch:
    locus: int


MatchResult = Identical | Mismatch

IDENTICAL = Identical()


@dataclass(frozen=True)
class MismatchReport:
    locus: int
    expected_snippet: str
    actual_snippet: str

    def message(self) -> str:
        return (
            "Nope. Not an exact match.\n"
            f"First difference at index {self.locus}\n"
            f"Editor:  …{self.expected_snippet}…\n"
            f"Retyped: …{self.actual_snippet}…"
        )


class SaveState(Enum):
    IDLE = "idle"
    AWAITING_RETYPE = "awaiting_retype"
    COMPARING = "comparing"
    SAVED = "saved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class SaveOutcome(Enum):
    """How a save attempt ended; CANCELLED is never treated as an error."""

    SAVED = "saved"
    CANCELLED = "cancelled"
    MISMATCH = "mismatch"
    IO_FAILURE = "io_failure"


class EditKind(Enum):
    INSERT = auto()
    DELETE = auto()
    REPLACE = auto()


class UnsavedChoice(Enum):
    SAVE = auto()
    DISCARD = auto()
    CANCEL = auto()


class FontStyle(IntFlag):
    PLAIN = 0
    BOLD = 1
    ITALIC = 2


@dataclass(frozen=True)
class FontPreference:
    family: str
    size: int
    style: FontStyle = FontStyle.PLAIN

    @property
    def bold(self) -> bool:
        return bool(self.style & FontStyle.BOLD)

    @property
    def italic(self) -> bool:
        return bool(self.style & FontStyle.ITALIC)

    def with_size(self, size: int) -> FontPreference:
        return replace(self, size=size)

    def toggled(self, flag: FontStyle) -> FontPreference:
        return replace(self, style=FontStyle(self.style ^ flag))
