from __future__ import annotations

from PyQt6.QtCore import QMimeData
from PyQt6.QtGui import QContextMenuEvent, QFont, QFontDatabase, QKeyEvent, QKeySequence
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QLabel,
    QPlainTextEdit,
    QVBoxLayout,
)

from trollpad.utils.constants import RETYPE_FONT_SIZE, RETYPE_PROMPT, RETYPE_TITLE


class NoPasteTextEdit(QPlainTextEdit):
    """
    Plain text box that refuses clipboard, selection and drag-and-drop input.

    Every paste route in QPlainTextEdit ends in insertFromMimeData, so that is the
    one place the content is dropped; the shortcut and menu entry are hidden too.
    """

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setAcceptDrops(False)

    def canInsertFromMimeData(self, source: QMimeData) -> bool:
        return False

    def insertFromMimeData(self, source: QMimeData) -> None:
        pass

    def keyPressEvent(self, e: QKeyEvent) -> None:
        if e.matches(QKeySequence.StandardKey.Paste):
            e.accept()
            return
        super().keyPressEvent(e)

    def contextMenuEvent(self, e: QContextMenuEvent) -> None:
        menu = self.createStandardContextMenu()
        for act in menu.actions():
            if act.text().replace("&", "").startswith("Paste"):
                act.setEnabled(False)
        menu.exec(e.globalPos())
        menu.deleteLater()


class RetypeDialog(QDialog):
    """Modal OK/Cancel dialog hosting the empty verification box."""

    def __init__(self, parent=None, *, title: str = RETYPE_TITLE, prompt_html: str = RETYPE_PROMPT):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.resize(700, 460)

        # Widgets
        self.prompt_label = QLabel(prompt_html)
        self.prompt_label.setWordWrap(True)

        self.verify_edit = NoPasteTextEdit(self)
        font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        font.setPointSize(RETYPE_FONT_SIZE)
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.verify_edit.setFont(font)
        self.verify_edit.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.verify_edit.setTabChangesFocus(False)

        self.buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )

        # Layout
        root = QVBoxLayout(self)
        root.setSpacing(8)
        root.addWidget(self.prompt_label)
        root.addWidget(self.verify_edit, 1)
        root.addWidget(self.buttons)

        # Signals
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

        self.verify_edit.setFocus()

    def text(self) -> str:
        return self.verify_edit.toPlainText()
