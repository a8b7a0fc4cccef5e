"""Unit tests for paginator arithmetic and header text."""

import pytest

from artwork_browser.gui.models.pagination import (
    page_window,
    selection_summary_text,
    showing_range,
    showing_text,
    total_pages,
)
from artwork_browser.selection import SelectionSnapshot, SelectionState


class TestPageWindow:

    @pytest.mark.parametrize(
        "current, count, expected",
        [
            (1, 10, [1, 2, 3, 4, 5]),
            (2, 10, [1, 2, 3, 4, 5]),
            (3, 10, [1, 2, 3, 4, 5]),
            (4, 10, [2, 3, 4, 5, 6]),
            (6, 10, [4, 5, 6, 7, 8]),
            (9, 10, [6, 7, 8, 9, 10]),
            (10, 10, [6, 7, 8, 9, 10]),
            (1, 3, [1, 2, 3]),
            (2, 1, [1]),
        ],
    )
    def test_page_window_when_current_given_then_five_wide_window(self, current, count, expected):
        assert page_window(current, count) == expected

    def test_page_window_when_no_pages_then_empty(self):
        assert page_window(1, 0) == []


class TestShowing:

    def test_total_pages_when_partial_last_page_then_rounds_up(self):
        assert total_pages(30, 12) == 3

    def test_total_pages_when_empty_then_zero(self):
        assert total_pages(0, 12) == 0

    def test_showing_range_when_first_page_then_one_to_twelve(self):
        assert showing_range(1, 12, 30) == (1, 12)

    def test_showing_range_when_last_page_then_clamped(self):
        assert showing_range(3, 12, 30) == (25, 30)

    def test_showing_range_when_past_end_then_zero(self):
        assert showing_range(4, 12, 30) == (0, 0)

    def test_showing_text_when_empty_then_zero_entries(self):
        assert showing_text(1, 12, 0) == "Showing 0 to 0 of 0 entries"

    def test_showing_text_when_page_two_then_formatted(self):
        assert showing_text(2, 12, 30) == "Showing 13 to 24 of 30 entries"


class TestSelectionSummaryText:

    def test_summary_when_idle_then_count_only(self):
        snapshot = SelectionSnapshot(state=SelectionState.IDLE, target=None, selected_count=3)
        assert selection_summary_text(snapshot) == "Selected: 3 rows"

    def test_summary_when_pursuing_then_progress_shown(self):
        snapshot = SelectionSnapshot(state=SelectionState.PURSUING, target=20, selected_count=12)
        assert selection_summary_text(snapshot) == (
            "Selected: 12 rows (selecting 20 across pages, 8 remaining)"
        )
