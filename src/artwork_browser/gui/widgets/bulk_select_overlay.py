"""
Popup panel for selecting or deselecting N rows at once.
"""
from typing import Callable, Optional

from PySide6.QtCore import QPoint, Qt, Signal
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QLineEdit, QMessageBox, QPushButton, QVBoxLayout, QWidget
)

from artwork_browser.gui.styles.theme import Colors, Fonts, Styles
from artwork_browser.selection import SelectionCountError, parse_selection_count


class BulkSelectOverlay(QFrame):
    """
    Dismissable popup with a count input and Select / Deselect buttons.

    Invalid input shows a warning and emits nothing. Valid input emits
    selectRequested / deselectRequested, clears the field and hides.
    """

    selectRequested = Signal(int)
    deselectRequested = Signal(int)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent, Qt.WindowType.Popup | Qt.WindowType.FramelessWindowHint)
        self.setObjectName("bulkSelectOverlay")
        self.setStyleSheet(Styles.OVERLAY_PANEL)
        self.setMinimumWidth(400)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(8)

        title = QLabel("Select Multiple Rows")
        title.setStyleSheet(f"font-size: {Fonts.H2}; font-weight: {Fonts.WEIGHT_BOLD};")
        layout.addWidget(title)

        hint = QLabel("Enter number of rows to select across all pages")
        hint.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(hint)

        row = QHBoxLayout()
        row.setSpacing(12)

        self.count_input = QLineEdit()
        self.count_input.setPlaceholderText("e.g., 2")
        self.count_input.setStyleSheet(Styles.INPUT_FIELD)
        self.count_input.returnPressed.connect(self.submit_select)
        row.addWidget(self.count_input, stretch=1)

        self.select_button = QPushButton("Select")
        self.select_button.setStyleSheet(Styles.BUTTON_PRIMARY)
        self.select_button.clicked.connect(self.submit_select)
        row.addWidget(self.select_button)

        self.deselect_button = QPushButton("Deselect")
        self.deselect_button.setStyleSheet(Styles.BUTTON_SECONDARY)
        self.deselect_button.clicked.connect(self.submit_deselect)
        row.addWidget(self.deselect_button)

        layout.addLayout(row)

    def toggle_below(self, anchor: QWidget) -> None:
        """Show under the anchor widget, or hide if already visible."""
        if self.isVisible():
            self.hide()
            return
        self.adjustSize()
        pos = anchor.mapToGlobal(QPoint(anchor.width() - self.width(), anchor.height() + 4))
        self.move(pos)
        self.show()
        self.count_input.setFocus()

    def submit_select(self) -> None:
        self._submit(self.selectRequested.emit)

    def submit_deselect(self) -> None:
        self._submit(self.deselectRequested.emit)

    def _submit(self, emit: Callable[[int], None]) -> None:
        try:
            count = parse_selection_count(self.count_input.text())
        except SelectionCountError as e:
            QMessageBox.warning(self, "Invalid Number", e.message)
            return
        self.count_input.clear()
        self.hide()
        emit(count)
