"""App constants."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CONTEXT_RADIUS,
    DEFAULT_FONT_SIZE,
    DEFAULT_SAVE_NAME,
    FALLBACK_FONT_FAMILIES,
    FILE_FILTER,
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
    SETTINGS_FONT_FAMILY,
    SETTINGS_FONT_SIZE,
    SETTINGS_FONT_STYLE,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CONTEXT_RADIUS",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_SAVE_NAME",
    "FALLBACK_FONT_FAMILIES",
    "FILE_FILTER",
    "MAX_FONT_SIZE",
    "MIN_FONT_SIZE",
    "SETTINGS_FONT_FAMILY",
    "SETTINGS_FONT_SIZE",
    "SETTINGS_FONT_STYLE",
]
