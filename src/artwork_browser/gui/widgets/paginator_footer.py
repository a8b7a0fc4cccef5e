"""
Paginator footer: "Showing X to Y of Z entries" plus prev/next and a
window of numbered page buttons.
"""
from typing import List

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from artwork_browser.core.models import PAGE_SIZE
from artwork_browser.gui.models.pagination import page_window, showing_range, total_pages
from artwork_browser.gui.styles.theme import Colors, Styles


class PaginatorFooter(QWidget):
    """Footer paginator. Emits pageRequested(page_number) on clicks."""

    pageRequested = Signal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.current_page = 1
        self.total_count = 0
        self.page_size = PAGE_SIZE

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 0)
        layout.setSpacing(4)

        self.info_label = QLabel()
        self.info_label.setTextFormat(Qt.TextFormat.RichText)
        self.info_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(self.info_label)
        layout.addStretch()

        self.prev_button = QPushButton("‹")
        self.prev_button.setToolTip("Previous Page")
        self.prev_button.setStyleSheet(Styles.PAGE_BUTTON)
        self.prev_button.clicked.connect(lambda: self._request(self.current_page - 1))
        layout.addWidget(self.prev_button)

        self.pages_container = QWidget()
        self.pages_layout = QHBoxLayout(self.pages_container)
        self.pages_layout.setContentsMargins(0, 0, 0, 0)
        self.pages_layout.setSpacing(2)
        layout.addWidget(self.pages_container)

        self.next_button = QPushButton("›")
        self.next_button.setToolTip("Next Page")
        self.next_button.setStyleSheet(Styles.PAGE_BUTTON)
        self.next_button.clicked.connect(lambda: self._request(self.current_page + 1))
        layout.addWidget(self.next_button)

        self.page_buttons: List[QPushButton] = []
        self.update_state(1, 0, PAGE_SIZE)

    @property
    def page_count(self) -> int:
        return total_pages(self.total_count, self.page_size)

    def update_state(self, current_page: int, total_count: int, page_size: int) -> None:
        """Re-render for a newly displayed page."""
        self.current_page = current_page
        self.total_count = total_count
        self.page_size = page_size

        first, last = showing_range(current_page, page_size, total_count)
        self.info_label.setText(
            f"Showing <b>{first}</b> to <b>{last}</b> of <b>{max(total_count, 0)}</b> entries"
        )

        self.prev_button.setEnabled(current_page > 1)
        self.next_button.setEnabled(current_page < self.page_count)
        self._rebuild_page_buttons()

    def _rebuild_page_buttons(self) -> None:
        for button in self.page_buttons:
            self.pages_layout.removeWidget(button)
            button.deleteLater()
        self.page_buttons = []

        for page_number in page_window(self.current_page, self.page_count):
            button = QPushButton(str(page_number))
            button.setToolTip(f"Page {page_number}")
            is_current = page_number == self.current_page
            button.setStyleSheet(Styles.PAGE_BUTTON_ACTIVE if is_current else Styles.PAGE_BUTTON)
            button.setProperty("current", is_current)
            button.clicked.connect(lambda _checked=False, n=page_number: self._request(n))
            self.pages_layout.addWidget(button)
            self.page_buttons.append(button)

    def _request(self, page_number: int) -> None:
        if page_number < 1 or page_number > self.page_count:
            return
        self.pageRequested.emit(page_number)
