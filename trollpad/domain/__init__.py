"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import IAppConfig, IConfigService, IFileService, ISettingsService
from .models import (
    IDENTICAL,
    Document,
    EditKind,
    FontPreference,
    FontStyle,
    Identical,
    MatchResult,
    Mismatch,
    MismatchReport,
    SaveOutcome,
    SaveState,
    UnsavedChoice,
)

__all__ = [
    "IAppConfig",
    "IConfigService",
    "IFileService",
    "ISettingsService",
    "IDENTICAL",
    "Document",
    "EditKind",
    "FontPreference",
    "FontStyle",
    "Identical",
    "MatchResult",
    "Mismatch",
    "MismatchReport",
    "SaveOutcome",
    "SaveState",
    "UnsavedChoice",
]
