"""Tests for PaginatorFooter."""

import pytest

from artwork_browser.gui.widgets.paginator_footer import PaginatorFooter


@pytest.fixture
def footer(qtbot):
    widget = PaginatorFooter()
    qtbot.addWidget(widget)
    return widget


def _labels(footer):
    return [button.text() for button in footer.page_buttons]


class TestPaginatorFooter:

    def test_init_when_empty_then_zero_entries_and_no_buttons(self, footer):
        assert footer.info_label.text() == "Showing <b>0</b> to <b>0</b> of <b>0</b> entries"
        assert footer.page_buttons == []
        assert not footer.prev_button.isEnabled()
        assert not footer.next_button.isEnabled()

    def test_update_state_when_first_page_then_window_starts_at_one(self, footer):
        footer.update_state(1, 120, 12)
        assert _labels(footer) == ["1", "2", "3", "4", "5"]
        assert not footer.prev_button.isEnabled()
        assert footer.next_button.isEnabled()

    def test_update_state_when_middle_page_then_window_centred(self, footer):
        footer.update_state(6, 120, 12)
        assert _labels(footer) == ["4", "5", "6", "7", "8"]
        current = [b.text() for b in footer.page_buttons if b.property("current")]
        assert current == ["6"]

    def test_update_state_when_last_page_then_next_disabled(self, footer):
        footer.update_state(3, 30, 12)
        assert "Showing <b>25</b> to <b>30</b> of <b>30</b> entries" == footer.info_label.text()
        assert footer.prev_button.isEnabled()
        assert not footer.next_button.isEnabled()

    def test_page_button_when_clicked_then_page_requested(self, qtbot, footer):
        footer.update_state(1, 120, 12)
        with qtbot.waitSignal(footer.pageRequested) as blocker:
            footer.page_buttons[3].click()
        assert blocker.args == [4]

    def test_next_when_clicked_then_requests_following_page(self, qtbot, footer):
        footer.update_state(2, 120, 12)
        with qtbot.waitSignal(footer.pageRequested) as blocker:
            footer.next_button.click()
        assert blocker.args == [3]

    def test_prev_when_clicked_then_requests_previous_page(self, qtbot, footer):
        footer.update_state(2, 120, 12)
        with qtbot.waitSignal(footer.pageRequested) as blocker:
            footer.prev_button.click()
        assert blocker.args == [1]

    def test_request_when_out_of_range_then_ignored(self, qtbot, footer):
        footer.update_state(1, 30, 12)
        with qtbot.assertNotEmitted(footer.pageRequested):
            footer._request(0)
            footer._request(4)
