"""
Integration tests for MainWindow with a fake API client.

Covers paging, checkbox round trips and a bulk selection that has to
fetch a second page in the background.
"""

import logging
import threading
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMessageBox

from artwork_browser.api import ApiConfig, ArtworkRequestError
from artwork_browser.gui.main_window import MainWindow
from artwork_browser.gui.models.artwork_table_model import CHECK_COLUMN
from artwork_browser.selection import SelectionState

TOTAL = 30


class FakeClient:
    def __init__(self, make_page, gates, errors, calls):
        self._make_page = make_page
        self._gates = gates
        self._errors = errors
        self._calls = calls

    def fetch_page(self, page_number):
        self._calls.append(page_number)
        gate = self._gates.get(page_number)
        if gate is not None:
            gate.wait(5)
        # Errors fire once; a later fetch of the same page succeeds
        error = self._errors.pop(page_number, None)
        if error is not None:
            raise error
        return self._make_page(page_number, TOTAL)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return None


@pytest.fixture
def api(make_page):
    """Shared fake API state: per-page gates/errors and a call log."""
    state = SimpleNamespace(gates={}, errors={}, calls=[])
    state.factory = lambda: FakeClient(make_page, state.gates, state.errors, state.calls)
    return state


@pytest.fixture
def window(qtbot, api):
    win = MainWindow(client_factory=api.factory, config=ApiConfig(), load_on_start=False)
    qtbot.addWidget(win)
    yield win
    for gate in api.gates.values():
        gate.set()
    win.loader.shutdown()


def _load(qtbot, window, page_number):
    with qtbot.waitSignal(window.loader.pageLoaded, timeout=5000):
        window.go_to_page(page_number)


class TestPaging:

    def test_go_to_page_when_loaded_then_table_and_footer_updated(self, qtbot, window):
        _load(qtbot, window, 1)

        assert window.table_model.rowCount() == 12
        assert window.footer.info_label.text() == "Showing <b>1</b> to <b>12</b> of <b>30</b> entries"
        assert [b.text() for b in window.footer.page_buttons] == ["1", "2", "3"]
        assert window.header.summary_label.text() == "Selected: 0 rows"
        assert window.table_view.isEnabled()

    def test_go_to_page_when_superseded_then_newest_page_shown(self, qtbot, window, api):
        api.gates[1] = threading.Event()
        with qtbot.waitSignal(window.loader.pageLoaded, timeout=5000):
            window.go_to_page(1)
            window.go_to_page(3)
        api.gates[1].set()
        qtbot.wait(200)

        assert window.controller.current_page.page_number == 3
        assert window.table_model.rowCount() == 6

    def test_go_to_page_when_failed_then_previous_table_kept(self, qtbot, window, api):
        _load(qtbot, window, 1)
        api.errors[2] = ArtworkRequestError("Could not reach artworks API for page 2", 2)

        with qtbot.waitSignal(window.loader.pageFailed, timeout=5000):
            window.go_to_page(2)

        assert window.controller.current_page.page_number == 1
        assert window.table_model.rowCount() == 12
        assert "Failed to load page 2" in window.statusBar().currentMessage()


class TestSelection:

    def test_checkbox_when_toggled_then_selection_survives_navigation(self, qtbot, window):
        _load(qtbot, window, 1)
        model = window.table_model
        model.setData(model.index(1, CHECK_COLUMN), Qt.CheckState.Checked, Qt.ItemDataRole.CheckStateRole)
        assert window.header.summary_label.text() == "Selected: 1 rows"

        _load(qtbot, window, 2)
        assert model.checked_ids() == []
        _load(qtbot, window, 1)
        assert model.checked_ids() == [2]

    def test_header_click_when_check_column_then_page_toggled(self, qtbot, window):
        _load(qtbot, window, 1)
        window._on_header_clicked(CHECK_COLUMN)
        assert window.controller.selected_count == 12

    def test_bulk_select_when_target_spans_pages_then_second_page_scanned(self, qtbot, window, api):
        _load(qtbot, window, 1)

        window.bulk_select(20)
        assert window.controller.state is SelectionState.PURSUING
        assert window.table_model.all_checked()

        qtbot.waitUntil(lambda: window.controller.state is SelectionState.IDLE, timeout=5000)
        assert window.controller.selected_ids == frozenset(range(1, 21))
        assert window.header.summary_label.text() == "Selected: 20 rows"
        assert window.controller.current_page.page_number == 1

        _load(qtbot, window, 2)
        assert window.table_model.checked_ids() == list(range(13, 21))

    def test_bulk_select_when_scan_fails_then_pursuit_cancelled(self, qtbot, window, api):
        _load(qtbot, window, 1)
        api.errors[2] = ArtworkRequestError("Could not reach artworks API for page 2", 2)

        window.bulk_select(20)
        qtbot.waitUntil(lambda: window.controller.state is SelectionState.IDLE, timeout=5000)

        assert window.controller.selected_count == 12
        assert "Bulk selection stopped" in window.statusBar().currentMessage()

    def test_uncheck_when_pursuing_then_pursuit_cancelled(self, qtbot, window, api):
        _load(qtbot, window, 1)
        api.gates[2] = threading.Event()

        window.bulk_select(20)
        model = window.table_model
        model.setData(model.index(0, CHECK_COLUMN), Qt.CheckState.Unchecked, Qt.ItemDataRole.CheckStateRole)

        assert window.controller.state is SelectionState.IDLE
        api.gates[2].set()
        qtbot.waitUntil(lambda: not window.loader.is_scanning, timeout=5000)
        assert window.controller.selected_count == 11

    def test_bulk_select_when_earlier_scan_fails_then_new_pursuit_continues(self, qtbot, window, api):
        _load(qtbot, window, 1)
        api.gates[2] = threading.Event()
        api.errors[2] = ArtworkRequestError("Could not reach artworks API for page 2", 2)

        window.bulk_select(20)
        model = window.table_model
        model.setData(model.index(0, CHECK_COLUMN), Qt.CheckState.Unchecked, Qt.ItemDataRole.CheckStateRole)
        assert window.controller.state is SelectionState.IDLE

        window.bulk_select(20)
        assert window.loader.is_scanning
        api.gates[2].set()

        qtbot.waitUntil(lambda: window.controller.state is SelectionState.IDLE, timeout=5000)
        assert window.controller.selected_ids == frozenset(range(1, 21))
        assert api.calls == [1, 2, 2]

    def test_bulk_select_when_page_loading_then_ignored_until_loaded(self, qtbot, window, api):
        _load(qtbot, window, 1)
        window.overlay.toggle_below(window.header.bulk_button)
        api.gates[2] = threading.Event()

        window.go_to_page(2)
        assert not window.header.bulk_button.isEnabled()
        assert not window.overlay.isVisible()

        window.bulk_select(5)
        window.bulk_deselect(5)
        assert window.controller.selected_count == 0
        assert window.controller.state is SelectionState.IDLE

        api.gates[2].set()
        qtbot.waitUntil(lambda: not window.loader.is_loading, timeout=5000)
        assert window.header.bulk_button.isEnabled()

        window.bulk_select(5)
        assert window.controller.selected_ids == frozenset(range(13, 18))

    def test_bulk_select_when_invalid_then_warning_shown(self, qtbot, window, monkeypatch):
        warning = MagicMock()
        monkeypatch.setattr(QMessageBox, "warning", warning)
        _load(qtbot, window, 1)

        window.bulk_select(0)

        warning.assert_called_once()
        assert window.controller.selected_count == 0

    def test_bulk_deselect_when_called_then_page_rows_cleared(self, qtbot, window):
        _load(qtbot, window, 1)
        window.bulk_select(5)
        window.bulk_deselect(2)
        assert window.table_model.checked_ids() == [3, 4, 5]


class TestConsole:

    def test_drain_when_warning_logged_then_console_shows_it(self, qtbot, window):
        logging.getLogger("artwork_browser.tests.window").warning("Console check")
        window._drain_log_queue()
        assert "Console check" in window.console.text()
