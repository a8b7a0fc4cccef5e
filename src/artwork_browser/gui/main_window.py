"""
Main Window for the Artwork Browser.

Wires the page loader, the selection controller and the widgets:
- display loads replace the page window (last request wins)
- while a bulk selection is pending, the next page it needs is fetched
  in the background and offered to the controller
- checkbox edits and bulk requests go through the controller, and the
  table and header are re-rendered from its state
"""
import logging
import queue
from typing import Callable, Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QAbstractItemView, QHeaderView, QLabel, QMainWindow, QMessageBox,
    QSplitter, QStackedWidget, QTableView, QVBoxLayout, QWidget
)

from artwork_browser.api import ApiConfig, ArtworkClient
from artwork_browser.core.models import ArtworkPage
from artwork_browser.gui.models.artwork_table_model import ArtworkTableModel, CHECK_COLUMN
from artwork_browser.gui.models.pagination import showing_text
from artwork_browser.gui.services.page_loader import PageLoader
from artwork_browser.gui.styles.theme import Colors, Styles
from artwork_browser.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler
from artwork_browser.gui.widgets.bulk_select_overlay import BulkSelectOverlay
from artwork_browser.gui.widgets.console_widget import ConsoleWidget
from artwork_browser.gui.widgets.paginator_footer import PaginatorFooter
from artwork_browser.gui.widgets.selection_header import SelectionHeader
from artwork_browser.selection import SelectionController, SelectionCountError

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "artwork_browser"


class MainWindow(QMainWindow):
    def __init__(
        self,
        client_factory: Optional[Callable[[], ArtworkClient]] = None,
        config: Optional[ApiConfig] = None,
        load_on_start: bool = True,
    ):
        super().__init__()

        self.config = config or ApiConfig.from_env()
        factory = client_factory or (lambda: ArtworkClient(self.config))

        self.controller = SelectionController()
        self.loader = PageLoader(factory, self)

        self.setWindowTitle("Artwork Browser")
        self.resize(1280, 820)

        # Initialize Logging
        self.log_queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue, PACKAGE_LOGGER)
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

        # Central Widget
        self.central_widget = QWidget()
        self.central_widget.setObjectName("centralWidget")
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(16, 16, 16, 8)

        self.header = SelectionHeader()
        self.main_layout.addWidget(self.header)

        # Table + empty placeholder share one slot
        self.table_model = ArtworkTableModel(self)
        self.table_view = QTableView()
        self.table_view.setModel(self.table_model)
        self.table_view.setStyleSheet(Styles.TABLE)
        self.table_view.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.table_view.setSortingEnabled(False)
        self.table_view.verticalHeader().setVisible(False)
        self.table_view.setWordWrap(True)
        header_view = self.table_view.horizontalHeader()
        header_view.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        header_view.setSectionResizeMode(CHECK_COLUMN, QHeaderView.ResizeMode.Fixed)
        header_view.resizeSection(CHECK_COLUMN, 48)
        header_view.setSectionsClickable(True)
        header_view.sectionClicked.connect(self._on_header_clicked)
        self._sort_column: Optional[int] = None
        self._sort_order = Qt.SortOrder.AscendingOrder

        self.empty_label = QLabel("No artworks found.")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")

        self.table_stack = QStackedWidget()
        self.table_stack.addWidget(self.table_view)
        self.table_stack.addWidget(self.empty_label)

        self.footer = PaginatorFooter()

        table_panel = QWidget()
        table_layout = QVBoxLayout(table_panel)
        table_layout.setContentsMargins(0, 0, 0, 0)
        table_layout.addWidget(self.table_stack, stretch=1)
        table_layout.addWidget(self.footer)

        self.console = ConsoleWidget()

        self.splitter = QSplitter(Qt.Orientation.Vertical)
        self.splitter.addWidget(table_panel)
        self.splitter.addWidget(self.console)
        self.splitter.setStretchFactor(0, 4)
        self.splitter.setStretchFactor(1, 1)
        self.main_layout.addWidget(self.splitter, stretch=1)

        self.overlay = BulkSelectOverlay(self)

        # Signals
        self.header.bulk_button.clicked.connect(lambda: self.overlay.toggle_below(self.header.bulk_button))
        self.overlay.selectRequested.connect(self.bulk_select)
        self.overlay.deselectRequested.connect(self.bulk_deselect)
        self.table_model.checkedChanged.connect(self._on_checked_changed)
        self.footer.pageRequested.connect(self.go_to_page)
        self.loader.pageLoaded.connect(self._on_page_loaded)
        self.loader.pageFailed.connect(self._on_page_failed)
        self.loader.loadingChanged.connect(self._on_loading_changed)
        self.loader.scanLoaded.connect(self._on_scan_loaded)
        self.loader.scanFailed.connect(self._on_scan_failed)

        self._refresh_selection_views()
        if load_on_start:
            self.go_to_page(1)

    # -- Navigation ------------------------------------------------------------

    def go_to_page(self, page_number: int) -> None:
        """Request a page for display. A newer request supersedes this one."""
        if page_number < 1:
            return
        logger.debug(f"Navigating to page {page_number}")
        self.loader.request_page(page_number)

    def _on_loading_changed(self, loading: bool) -> None:
        self.table_view.setEnabled(not loading)
        self.footer.setEnabled(not loading)
        # Bulk requests act on the displayed page; hold them until it is current
        self.header.bulk_button.setEnabled(not loading)
        if loading:
            self.overlay.hide()
            self.statusBar().showMessage(f"Loading page {self.loader.pending_page}...")

    def _on_page_loaded(self, page: ArtworkPage) -> None:
        self.controller.show_page(page)
        self.table_model.set_page(page.records, self.controller.selected_on_page())
        if self._sort_column is not None:
            self.table_model.sort(self._sort_column, self._sort_order)
        self.table_stack.setCurrentWidget(self.empty_label if page.is_empty else self.table_view)
        self.footer.update_state(page.page_number, page.total_count, page.page_size)
        self.statusBar().showMessage(showing_text(page.page_number, page.page_size, page.total_count))
        self._refresh_selection_views()
        self._continue_pursuit()

    def _on_page_failed(self, page_number: int, message: str) -> None:
        # Table keeps showing whatever it had before
        self.statusBar().showMessage(f"Failed to load page {page_number}: {message}")
        self._continue_pursuit()

    # -- Selection -------------------------------------------------------------

    def _on_checked_changed(self, checked_ids: list) -> None:
        self.controller.apply_page_selection(checked_ids)
        self._refresh_selection_views()

    def bulk_select(self, count: int) -> None:
        if self.loader.is_loading:
            logger.warning(f"Ignoring bulk select while page {self.loader.pending_page} is loading")
            return
        try:
            self.controller.request_bulk_select(count)
        except SelectionCountError as e:
            QMessageBox.warning(self, "Invalid Number", e.message)
            return
        self._refresh_selection_views()
        self._continue_pursuit()

    def bulk_deselect(self, count: int) -> None:
        if self.loader.is_loading:
            logger.warning(f"Ignoring bulk deselect while page {self.loader.pending_page} is loading")
            return
        try:
            self.controller.request_bulk_deselect(count)
        except SelectionCountError as e:
            QMessageBox.warning(self, "Invalid Number", e.message)
            return
        self._refresh_selection_views()

    def _continue_pursuit(self) -> None:
        """Fetch the next page the pending bulk selection needs, if any."""
        next_page = self.controller.next_page_to_scan()
        if next_page is None or self.loader.is_scanning:
            return
        if next_page == self.loader.pending_page:
            # The display load in flight will deliver it
            return
        self.loader.request_scan(next_page, self.controller.pursuit_generation)

    def _on_scan_loaded(self, generation: int, page: ArtworkPage) -> None:
        if generation != self.controller.pursuit_generation:
            logger.debug(f"Dropping scanned page {page.page_number} from an earlier bulk selection")
        else:
            self.controller.offer_page(page)
            self._refresh_selection_views()
        self._continue_pursuit()

    def _on_scan_failed(self, generation: int, page_number: int, message: str) -> None:
        if generation != self.controller.pursuit_generation:
            logger.debug(f"Ignoring scan failure for page {page_number} from an earlier bulk selection")
            self._continue_pursuit()
            return
        self.controller.cancel_pursuit(f"page {page_number} failed to load")
        self.statusBar().showMessage(f"Bulk selection stopped: {message}")
        self._refresh_selection_views()

    def _refresh_selection_views(self) -> None:
        self.table_model.set_checked_ids(self.controller.selected_on_page())
        self.header.set_snapshot(self.controller.snapshot())

    def _on_header_clicked(self, section: int) -> None:
        if section == CHECK_COLUMN:
            self.table_model.toggle_all()
            return
        if not self.table_model.is_sortable(section):
            return
        if self._sort_column == section and self._sort_order == Qt.SortOrder.AscendingOrder:
            self._sort_order = Qt.SortOrder.DescendingOrder
        else:
            self._sort_order = Qt.SortOrder.AscendingOrder
        self._sort_column = section
        self.table_model.sort(section, self._sort_order)

    # -- Logging / lifecycle ---------------------------------------------------

    def _drain_log_queue(self):
        while True:
            try:
                msg = self.log_queue.get_nowait()
                if isinstance(msg, tuple) and len(msg) == 2:
                    text, level = msg
                    self.console.append_log(level, text)
                else:
                    self.console.append_log("INFO", str(msg))
                self.log_queue.task_done()
            except queue.Empty:
                break

    def closeEvent(self, event):
        self.log_timer.stop()
        self.loader.shutdown()
        detach_queue_handler(self._log_handler, PACKAGE_LOGGER)
        super().closeEvent(event)
