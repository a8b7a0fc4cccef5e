"""
Header bar: selection summary on the left, bulk-selection button on the right.
"""
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from artwork_browser.gui.models.pagination import selection_summary_text
from artwork_browser.gui.styles.theme import Colors, Styles
from artwork_browser.selection import SelectionSnapshot, SelectionState


class SelectionHeader(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 8)

        self.summary_label = QLabel()
        self.summary_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(self.summary_label)
        layout.addStretch()

        self.bulk_button = QPushButton("Select Multiple Rows")
        self.bulk_button.setStyleSheet(Styles.BUTTON_PRIMARY)
        layout.addWidget(self.bulk_button)

        self.set_snapshot(SelectionSnapshot(state=SelectionState.IDLE, target=None, selected_count=0))

    def set_snapshot(self, snapshot: SelectionSnapshot) -> None:
        self.summary_label.setText(selection_summary_text(snapshot))
