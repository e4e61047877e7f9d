from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from trollpad.domain.interfaces import ISettingsService
from trollpad.domain.models import FontPreference, FontStyle
from trollpad.utils.constants import (
    DEFAULT_FONT_SIZE,
    FALLBACK_FONT_FAMILIES,
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
)

logger = logging.getLogger(__name__)

_STYLE_MASK = int(FontStyle.BOLD | FontStyle.ITALIC)


def clamp_size(size: int) -> int:
    return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, int(size)))


class FontPreferenceService:
    """
    Editor font preference, kept apart from the save workflow.

    Family resolution order:
      1. Stored/requested family, if the host has it installed
      2. First installed entry of FALLBACK_FONT_FAMILIES
      3. The host's fixed-pitch system font
    Every change is written back to settings immediately.
    """

    def __init__(
        self,
        settings: ISettingsService,
        *,
        available_families: Callable[[], Iterable[str]],
        system_family: Callable[[], str],
    ) -> None:
        self._settings = settings
        self._available_families = available_families
        self._system_family = system_family
        self._current: FontPreference | None = None

    @property
    def current(self) -> FontPreference:
        if self._current is None:
            self._current = self.load()
        return self._current

    def resolve_family(self, requested: str | None) -> str:
        installed = {f.casefold(): f for f in self._available_families()}
        if requested and requested.casefold() in installed:
            return installed[requested.casefold()]
        for candidate in FALLBACK_FONT_FAMILIES:
            if candidate.casefold() in installed:
                if requested:
                    logger.info("Font %r not installed, using %r", requested, candidate)
                return installed[candidate.casefold()]
        return self._system_family()

    def load(self) -> FontPreference:
        size = self._settings.get_font_size()
        style = self._settings.get_font_style()
        pref = FontPreference(
            family=self.resolve_family(self._settings.get_font_family()),
            size=clamp_size(size) if size is not None else DEFAULT_FONT_SIZE,
            style=FontStyle(style & _STYLE_MASK) if style is not None else FontStyle.PLAIN,
        )
        self._current = pref
        return pref

    def apply(self, pref: FontPreference) -> FontPreference:
        pref = FontPreference(
            family=self.resolve_family(pref.family),
            size=clamp_size(pref.size),
            style=FontStyle(int(pref.style) & _STYLE_MASK),
        )
        self._settings.set_font_family(pref.family)
        self._settings.set_font_size(pref.size)
        self._settings.set_font_style(int(pref.style))
        self._current = pref
        logger.debug("Font preference set to %s", pref)
        return pref

    def set_family(self, family: str, size: int | None = None) -> FontPreference:
        cur = self.current
        return self.apply(FontPreference(family, size if size is not None else cur.size, cur.style))

    def zoom_in(self, step: int = 1) -> FontPreference:
        return self.apply(self.current.with_size(self.current.size + step))

    def zoom_out(self, step: int = 1) -> FontPreference:
        return self.apply(self.current.with_size(self.current.size - step))

    def reset_zoom(self) -> FontPreference:
        return self.apply(self.current.with_size(DEFAULT_FONT_SIZE))

    def toggle_bold(self) -> FontPreference:
        return self.apply(self.current.toggled(FontStyle.BOLD))

    def toggle_italic(self) -> FontPreference:
        return self.apply(self.current.toggled(FontStyle.ITALIC))
