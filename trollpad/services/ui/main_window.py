from __future__ import annotations

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QAction, QKeySequence, QTextCursor
from PyQt6.QtWidgets import (
    QFontDialog,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QStatusBar,
)

from trollpad.domain.models import FontPreference
from trollpad.services.edit_events import EditEventStream
from trollpad.services.ui.adapters.qt_edit_events import QtEditEventSource
from trollpad.services.ui.adapters.qt_fonts import to_qfont
from trollpad.services.ui.presenters.main_presenter import MainPresenter
from trollpad.utils.constants import APP_NAME, STATUS_REFRESH_MS


class MainWindow(QMainWindow):
    """Thin PyQt window; every file operation goes through the attached presenter."""

    def __init__(self, *, app_title: str = APP_NAME) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(900, 600)

        self._presenter: MainPresenter | None = None

        # Widgets
        self.editor = QPlainTextEdit(self)
        self.editor.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        self.setCentralWidget(self.editor)

        self._edit_events = EditEventStream()
        self._edit_source = QtEditEventSource(self.editor.document(), self._edit_events)

        # UI
        self._build_actions()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))
        self.status_label = QLabel(" Ready")
        self.statusBar().addWidget(self.status_label, 1)

        self._status_timer = QTimer(self)
        self._status_timer.setInterval(STATUS_REFRESH_MS)
        self._status_timer.timeout.connect(self.refresh_status_line)
        self._status_timer.start()

    # ---------- Presenter wiring ----------
    def attach_presenter(self, presenter: MainPresenter) -> None:
        self._presenter = presenter

    @property
    def presenter(self) -> MainPresenter | None:
        return self._presenter

    def _call(self, name: str) -> None:
        if self._presenter is not None:
            getattr(self._presenter, name)()

    # ---------- UI creation ----------
    def _build_actions(self):
        # File actions
        self.act_new = QAction(
            "New", self, shortcut=QKeySequence.StandardKey.New, triggered=lambda: self._call("new_file")
        )
        self.act_open = QAction(
            "Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=lambda: self._call("open_file"),
        )
        self.act_save = QAction(
            "Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=lambda: self._call("save")
        )
        self.act_save_as = QAction(
            "Save As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=lambda: self._call("save_as"),
        )
        self.act_exit = QAction("Exit", self, shortcut="Ctrl+Q", triggered=self.close)

        # Edit actions
        self.act_toggle_wrap = QAction(
            "Word Wrap",
            self,
            checkable=True,
            checked=True,
            triggered=self._toggle_wrap,
        )
        self.act_copy = QAction(
            "Copy", self, shortcut=QKeySequence.StandardKey.Copy, triggered=self.editor.copy
        )
        self.act_paste = QAction(
            "Paste", self, shortcut=QKeySequence.StandardKey.Paste, triggered=self.editor.paste
        )
        self.act_cut = QAction(
            "Cut", self, shortcut=QKeySequence.StandardKey.Cut, triggered=self.editor.cut
        )

        # View / font actions
        self.act_font = QAction("Font…", self, triggered=self._choose_font)
        self.act_zoom_in = QAction(
            "Zoom In", self, shortcut=QKeySequence.StandardKey.ZoomIn, triggered=lambda: self._call("zoom_in")
        )
        self.act_zoom_out = QAction(
            "Zoom Out",
            self,
            shortcut=QKeySequence.StandardKey.ZoomOut,
            triggered=lambda: self._call("zoom_out"),
        )
        self.act_zoom_reset = QAction(
            "Reset Zoom", self, shortcut="Ctrl+0", triggered=lambda: self._call("reset_zoom")
        )
        self.act_bold = QAction("Bold", self, checkable=True, triggered=lambda: self._call("toggle_bold"))
        self.act_italic = QAction(
            "Italic", self, checkable=True, triggered=lambda: self._call("toggle_italic")
        )

        # Help
        self.act_why = QAction("Why won’t it save?", self, triggered=lambda: self._call("show_why"))
        self.act_about = QAction("About", self, triggered=lambda: self._call("show_about"))

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_exit)

        editm = m.addMenu("&Edit")
        editm.addAction(self.act_toggle_wrap)
        editm.addSeparator()
        for a in (self.act_copy, self.act_paste, self.act_cut):
            editm.addAction(a)

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_font)
        viewm.addSeparator()
        for a in (self.act_zoom_in, self.act_zoom_out, self.act_zoom_reset):
            viewm.addAction(a)
        viewm.addSeparator()
        viewm.addAction(self.act_bold)
        viewm.addAction(self.act_italic)

        helpm = m.addMenu("&Help")
        helpm.addAction(self.act_why)
        helpm.addAction(self.act_about)

    # ---------- IMainView ----------
    @property
    def edit_events(self) -> EditEventStream:
        return self._edit_events

    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        self.editor.setPlainText(text)
        self.editor.moveCursor(QTextCursor.MoveOperation.Start)

    def apply_font(self, pref: FontPreference) -> None:
        self.editor.setFont(to_qfont(pref))
        self.act_bold.setChecked(pref.bold)
        self.act_italic.setChecked(pref.italic)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    # ---------- Actions ----------
    def refresh_status_line(self) -> None:
        if self._presenter is not None:
            self.status_label.setText(self._presenter.status_line())

    def _toggle_wrap(self, on: bool):
        mode = (
            QPlainTextEdit.LineWrapMode.WidgetWidth if on else QPlainTextEdit.LineWrapMode.NoWrap
        )
        self.editor.setLineWrapMode(mode)

    def _choose_font(self) -> None:
        if self._presenter is None:
            return
        font, ok = QFontDialog.getFont(self.editor.font(), self, "Choose editor font")
        if ok:
            self._presenter.set_font(font.family(), font.pointSize())

    # ---------- Close ----------
    def closeEvent(self, event):
        if self._presenter is None or self._presenter.request_close():
            self._status_timer.stop()
            event.accept()
        else:
            event.ignore()
