"""Concrete services: comparison, dirty tracking, the save gate and persistence."""

from .comparator import build_report, compare, first_mismatch
from .dirty_tracker import DirtyTracker
from .edit_events import EditEventStream
from .file_service import FileService
from .font_preferences import FontPreferenceService
from .save_gate import SaveGate
from .settings_service import SettingsService
from .unsaved_guard import UnsavedChangeGuard

__all__ = [
    "DirtyTracker",
    "EditEventStream",
    "FileService",
    "FontPreferenceService",
    "SaveGate",
    "SettingsService",
    "UnsavedChangeGuard",
    "build_report",
    "compare",
    "first_mismatch",
]
