from __future__ import annotations

from PyQt6.QtCore import QSettings

from trollpad.domain.interfaces import ISettingsService
from trollpad.utils.constants import (
    SETTINGS_FONT_FAMILY,
    SETTINGS_FONT_SIZE,
    SETTINGS_FONT_STYLE,
)


def _to_int(value: object) -> int | None:
    # INI-backed QSettings hands numbers back as strings
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


class SettingsService(ISettingsService):
    """Persist the editor font preference (family, size, style bits)."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_font_family(self) -> str | None:
        v = self._s.value(SETTINGS_FONT_FAMILY)
        return v.strip() if isinstance(v, str) and v.strip() else None

    def set_font_family(self, family: str) -> None:
        self._s.setValue(SETTINGS_FONT_FAMILY, family)
        self._s.sync()

    def get_font_size(self) -> int | None:
        return _to_int(self._s.value(SETTINGS_FONT_SIZE))

    def set_font_size(self, size: int) -> None:
        self._s.setValue(SETTINGS_FONT_SIZE, int(size))
        self._s.sync()

    def get_font_style(self) -> int | None:
        return _to_int(self._s.value(SETTINGS_FONT_STYLE))

    def set_font_style(self, style: int) -> None:
        self._s.setValue(SETTINGS_FONT_STYLE, int(style))
        self._s.sync()
