from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from collections import deque
from pathlib import Path
from typing import Any

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from trollpad.domain.models import EditKind, FontPreference, UnsavedChoice
from trollpad.services.dirty_tracker import DirtyTracker
from trollpad.services.edit_events import EditEventStream
from trollpad.services.file_service import FileService
from trollpad.services.font_preferences import FontPreferenceService
from trollpad.services.settings_service import SettingsService


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Fakes for the UI ports ---


class FakeMessages:
    """Records every dialog; ask_unsaved answers from a preset choice."""

    def __init__(self, unsaved_choice: UnsavedChoice = UnsavedChoice.CANCEL) -> None:
        self.unsaved_choice = unsaved_choice
        self.infos: list[tuple[str, str]] = []
        self.errors: list[tuple[str, str]] = []
        self.prompts = 0

    def info(self, parent: Any | None, title: str, text: str) -> None:
        self.infos.append((title, text))

    def error(self, parent: Any | None, title: str, text: str) -> None:
        self.errors.append((title, text))

    def ask_unsaved(self, parent: Any | None, title: str, text: str) -> UnsavedChoice:
        self.prompts += 1
        return self.unsaved_choice


class FakeDialogs:
    """File pickers answering from queues; an empty queue means the user aborted."""

    def __init__(self) -> None:
        self.open_answers: deque[Path | None] = deque()
        self.save_answers: deque[Path | None] = deque()
        self.open_calls = 0
        self.save_calls: list[str | None] = []

    def get_open_file(self, parent, caption, start_dir, filter_str) -> Path | None:
        self.open_calls += 1
        return self.open_answers.popleft() if self.open_answers else None

    def get_save_file(self, parent, caption, start_path, filter_str) -> Path | None:
        self.save_calls.append(start_path)
        return self.save_answers.popleft() if self.save_answers else None


class FakeRetype:
    """Retype dialog answering from a queue; None (or an empty queue) is a cancel."""

    def __init__(self, *answers: str | None) -> None:
        self.answers: deque[str | None] = deque(answers)
        self.calls = 0
        self.on_prompt = None

    def prompt_retype(self, parent, title: str, prompt_html: str) -> str | None:
        self.calls += 1
        if self.on_prompt is not None:
            self.on_prompt()
        return self.answers.popleft() if self.answers else None


class FakeView:
    """In-memory IMainView; setting text emits an edit event like the Qt editor does."""

    def __init__(self, text: str = "") -> None:
        self._events = EditEventStream()
        self.text = text
        self.titles: list[str] = []
        self.statuses: list[str] = []
        self.fonts: list[FontPreference] = []

    @property
    def edit_events(self) -> EditEventStream:
        return self._events

    def get_editor_text(self) -> str:
        return self.text

    def set_editor_text(self, text: str) -> None:
        self.text = text
        self._events.emit(EditKind.REPLACE)

    def type(self, text: str) -> None:
        self.text += text
        self._events.emit(EditKind.INSERT)

    def apply_font(self, pref: FontPreference) -> None:
        self.fonts.append(pref)

    def set_title(self, title: str) -> None:
        self.titles.append(title)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statuses.append(text)


class FakeSettings:
    """Dict-backed ISettingsService."""

    def __init__(self, **values: Any) -> None:
        self.values: dict[str, Any] = dict(values)

    def get_font_family(self) -> str | None:
        return self.values.get("family")

    def set_font_family(self, family: str) -> None:
        self.values["family"] = family

    def get_font_size(self) -> int | None:
        return self.values.get("size")

    def set_font_size(self, size: int) -> None:
        self.values["size"] = size

    def get_font_style(self) -> int | None:
        return self.values.get("style")

    def set_font_style(self, style: int) -> None:
        self.values["style"] = style


class FailingFiles(FileService):
    """FileService whose writes always fail."""

    def __init__(self, message: str = "disk full") -> None:
        self.message = message
        self.write_attempts = 0

    def write_bytes_atomic(self, path: Path, data: bytes) -> None:
        self.write_attempts += 1
        raise OSError(self.message)


INSTALLED_FAMILIES = ["DejaVu Sans Mono", "Courier New", "Noto Sans"]


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def tracker() -> DirtyTracker:
    return DirtyTracker()


@pytest.fixture()
def fake_settings() -> FakeSettings:
    return FakeSettings()


@pytest.fixture()
def fonts(fake_settings: FakeSettings) -> FontPreferenceService:
    return FontPreferenceService(
        fake_settings,
        available_families=lambda: INSTALLED_FAMILIES,
        system_family=lambda: "SystemMono",
    )
