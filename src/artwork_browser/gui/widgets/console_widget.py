"""
Console widget showing the application's log records.

Records arrive as (message, level) pairs drained from the queue that
QueueLogHandler fills; level is a logging level name.
"""
from datetime import datetime
from typing import Dict, Optional, Set

from PySide6.QtCore import Slot
from PySide6.QtGui import QColor, QFont, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import QApplication, QGroupBox, QMenu, QPlainTextEdit, QSizePolicy, QVBoxLayout

from artwork_browser.gui.styles.theme import Colors, Fonts

# Level names hidden from the console unless overridden per instance.
# Page fetch chatter is INFO; failures and dropped input are WARNING/ERROR.
CONSOLE_SUPPRESSED_LEVELS: Set[str] = {"INFO"}

MAX_CONSOLE_LINES = 1000

LEVEL_COLORS: Dict[str, str] = {
    "CRITICAL": Colors.ERROR,
    "ERROR": Colors.ERROR,
    "WARNING": Colors.WARNING,
    "INFO": Colors.TEXT_PRIMARY,
}


class ConsoleWidget(QGroupBox):
    def __init__(self, parent=None, suppressed_levels: Optional[Set[str]] = None):
        super().__init__("Console Log", parent)

        levels = CONSOLE_SUPPRESSED_LEVELS if suppressed_levels is None else suppressed_levels
        self.suppressed_levels: Set[str] = {level.upper() for level in levels}

        self.setMinimumHeight(40)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setReadOnly(True)
        self.text_edit.setMaximumBlockCount(MAX_CONSOLE_LINES)

        font = QFont(Fonts.MONO_FONT.split(",")[0])
        font.setPointSize(int(Fonts.CONSOLE.replace("pt", "")))
        self.text_edit.setFont(font)
        self.text_edit.setStyleSheet(
            f"QPlainTextEdit {{ border: none; background-color: {Colors.SURFACE}; padding: 4px 8px; }}"
        )
        layout.addWidget(self.text_edit)

        self._formats: Dict[str, QTextCharFormat] = {}
        for level, color in LEVEL_COLORS.items():
            fmt = QTextCharFormat()
            fmt.setForeground(QColor(color))
            self._formats[level] = fmt

    @Slot(str, str)
    def append_log(self, level: str, message: str):
        """Append one timestamped line, coloured by level."""
        level = level.upper()
        if level in self.suppressed_levels:
            return

        cursor = self.text_edit.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        timestamp = datetime.now().strftime("%H:%M:%S")
        cursor.insertText(
            f"[{timestamp}] [{level}] {message}\n",
            self._formats.get(level, self._formats["INFO"]),
        )
        self.text_edit.setTextCursor(cursor)
        self.text_edit.ensureCursorVisible()

    def contextMenuEvent(self, event):
        menu = QMenu(self)
        copy_all_action = menu.addAction("Copy All")
        clear_action = menu.addAction("Clear")

        action = menu.exec(event.globalPos())
        if action == copy_all_action:
            QApplication.clipboard().setText(self.text())
        elif action == clear_action:
            self.clear()

    def clear(self):
        self.text_edit.clear()

    def text(self) -> str:
        return self.text_edit.toPlainText()
