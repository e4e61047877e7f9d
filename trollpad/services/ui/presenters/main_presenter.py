from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from trollpad.domain.interfaces import IAppConfig, IFileService
from trollpad.domain.models import Document, FontPreference
from trollpad.services.dirty_tracker import DirtyTracker
from trollpad.services.edit_events import EditEventStream
from trollpad.services.file_service import LF, detect_newline, to_lf
from trollpad.services.font_preferences import FontPreferenceService
from trollpad.services.save_gate import SaveGate
from trollpad.services.ui.ports.dialogs import IFileDialogService, IRetypeDialogService
from trollpad.services.ui.ports.messages import IMessageService
from trollpad.services.unsaved_guard import UnsavedChangeGuard
from trollpad.utils.constants import APP_NAME, FILE_FILTER, WHY_WONT_IT_SAVE

logger = logging.getLogger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    @property
    def edit_events(self) -> EditEventStream: ...

    # editor
    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...
    def apply_font(self, pref: FontPreference) -> None: ...

    # window chrome
    def set_title(self, title: str) -> None: ...
    def show_status(self, text: str, msec: int = 3000) -> None: ...


class MainPresenter:
    """
    Coordinates the single document: new/open/save/close, title and status line.

    Owns the save target and the dirty tracker; the view owns the text.
    """

    def __init__(
        self,
        view: IMainView,
        files: IFileService,
        messages: IMessageService,
        dialogs: IFileDialogService,
        retype: IRetypeDialogService,
        fonts: FontPreferenceService,
        config: IAppConfig | None = None,
    ) -> None:
        self.view = view
        self.files = files
        self.messages = messages
        self.dialogs = dialogs
        self.fonts = fonts
        self.config = config

        self.document = Document()
        self.tracker = DirtyTracker()
        self.save_gate = SaveGate(
            document=self.document,
            text_source=view.get_editor_text,
            tracker=self.tracker,
            files=files,
            dialogs=dialogs,
            retype=retype,
            messages=messages,
            parent=view,
            notify=view.show_status,
        )
        self.guard = UnsavedChangeGuard(
            tracker=self.tracker,
            save_gate=self.save_gate,
            messages=messages,
            parent=view,
        )

        self.tracker.attach(view.edit_events)
        self.tracker.add_listener(lambda _dirty: self._update_title())

    def start(self, start_path: Path | None = None) -> None:
        self.view.apply_font(self.fonts.current)
        self.tracker.mark_clean()
        self._update_title()
        if start_path is not None:
            self.open_file(start_path)

    # ---------- File ops ----------

    def new_file(self) -> bool:
        if not self.guard.guard_destructive_action():
            return False
        self.view.set_editor_text("")
        self.document.path = None
        self.document.newline = LF
        self.tracker.mark_clean()
        self._update_title()
        return True

    def open_file(self, path: Path | None = None) -> bool:
        if not self.guard.guard_destructive_action():
            return False
        if path is None:
            start_dir = str(self.document.path.parent) if self.document.path else None
            path = self.dialogs.get_open_file(self.view, "Open", start_dir, FILE_FILTER)
            if path is None:
                return False
        try:
            text = self.files.read_text(path)
        except OSError as e:
            logger.warning("Failed to open %s: %s", path, e)
            self.messages.error(self.view, "Open Error", f"Failed to open file:\n{e}")
            return False

        self.view.set_editor_text(to_lf(text))
        self.document.path = path
        self.document.newline = detect_newline(text)
        self.tracker.mark_clean()
        self._update_title()
        self.view.show_status(f"Opened: {path}", 3000)
        logger.info("Opened %s", path)
        return True

    def save(self) -> bool:
        ok = self.save_gate.request_save(False)
        self._update_title()
        return ok

    def save_as(self) -> bool:
        ok = self.save_gate.request_save(True)
        self._update_title()
        return ok

    def request_close(self) -> bool:
        return self.guard.guard_destructive_action()

    # ---------- Chrome ----------

    def window_title(self) -> str:
        star = "*" if self.tracker.is_dirty() else ""
        return f"{star}{self.document.display_name} — {APP_NAME}"

    def status_line(self) -> str:
        text = self.view.get_editor_text()
        star = "*" if self.tracker.is_dirty() else ""
        lines = text.count("\n") + 1
        return (
            f" {star}{self.document.display_name}"
            f"    |    Lines: {lines}    Chars: {len(text)}"
        )

    def _update_title(self) -> None:
        self.view.set_title(self.window_title())

    # ---------- Help ----------

    def show_why(self) -> None:
        self.messages.info(self.view, "hehe :)", WHY_WONT_IT_SAVE)

    def show_about(self) -> None:
        version = self.config.get_version() if self.config is not None else "0.0.0"
        self.messages.info(self.view, "About", f"{APP_NAME}\nVersion {version}")

    # ---------- Font ----------

    def _apply_font(self, pref: FontPreference) -> FontPreference:
        self.view.apply_font(pref)
        return pref

    def set_font(self, family: str, size: int | None = None) -> FontPreference:
        return self._apply_font(self.fonts.set_family(family, size))

    def zoom_in(self) -> FontPreference:
        return self._apply_font(self.fonts.zoom_in())

    def zoom_out(self) -> FontPreference:
        return self._apply_font(self.fonts.zoom_out())

    def reset_zoom(self) -> FontPreference:
        return self._apply_font(self.fonts.reset_zoom())

    def toggle_bold(self) -> FontPreference:
        return self._apply_font(self.fonts.toggle_bold())

    def toggle_italic(self) -> FontPreference:
        return self._apply_font(self.fonts.toggle_italic())
