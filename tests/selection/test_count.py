"""Unit tests for bulk-selection count validation."""

import pytest

from artwork_browser.selection import (
    INVALID_COUNT_MESSAGE,
    MAX_SELECTION_COUNT,
    SelectionCountError,
    parse_selection_count,
    validate_selection_count,
)


class TestParseSelectionCount:

    @pytest.mark.parametrize(
        "text, expected",
        [("1", 1), ("20", 20), ("  7 ", 7), ("+3", 3), ("1,000", 1000), ("12,345", 12345), ("007", 7)],
    )
    def test_parse_when_valid_then_returns_int(self, text, expected):
        assert parse_selection_count(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "abc", "0", "-5", "2.5", "1e3", "²", "+-5", "1,2,3", ",5,", "1,00", "12,3456", None],
    )
    def test_parse_when_invalid_then_raises_with_message(self, text):
        with pytest.raises(SelectionCountError) as exc_info:
            parse_selection_count(text)
        assert exc_info.value.message == INVALID_COUNT_MESSAGE

    def test_parse_when_above_maximum_then_raises_range_message(self):
        with pytest.raises(SelectionCountError, match="no larger than"):
            parse_selection_count(str(MAX_SELECTION_COUNT + 1))

    def test_parse_when_at_maximum_then_accepted(self):
        assert parse_selection_count(str(MAX_SELECTION_COUNT)) == MAX_SELECTION_COUNT


class TestValidateSelectionCount:

    def test_validate_when_positive_int_then_returned(self):
        assert validate_selection_count(12) == 12

    @pytest.mark.parametrize("count", [0, -1, None, True, False, 1.0, "3"])
    def test_validate_when_invalid_then_raises(self, count):
        with pytest.raises(SelectionCountError):
            validate_selection_count(count)

    def test_error_when_raised_then_is_value_error(self):
        assert issubclass(SelectionCountError, ValueError)
