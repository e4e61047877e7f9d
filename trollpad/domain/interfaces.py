from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class IFileService(Protocol):
    """Byte-level persistence. Writes should be atomic when possible; failures raise OSError."""

    def read_bytes(self, path: Path) -> bytes: ...
    def write_bytes_atomic(self, path: Path, data: bytes) -> None: ...
    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve the font preference keys. Missing values come back as None."""

    def get_font_family(self) -> str | None: ...
    def set_font_family(self, family: str) -> None: ...
    def get_font_size(self) -> int | None: ...
    def set_font_size(self, size: int) -> None: ...
    def get_font_style(self) -> int | None: ...
    def set_font_style(self, style: int) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...
