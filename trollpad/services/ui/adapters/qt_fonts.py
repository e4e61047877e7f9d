from __future__ import annotations

from PyQt6.QtGui import QFont, QFontDatabase

from trollpad.domain.models import FontPreference


def installed_families() -> list[str]:
    return list(QFontDatabase.families())


def system_fixed_family() -> str:
    return QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont).family()


def to_qfont(pref: FontPreference) -> QFont:
    font = QFont(pref.family, pref.size)
    font.setBold(pref.bold)
    font.setItalic(pref.italic)
    font.setStyleHint(QFont.StyleHint.Monospace)
    return font
