"""
Module: selection.count

Purpose:
    Validate the row count a user types into the bulk-selection panel.

Key Functions:
    - validate_selection_count(): Check an already-numeric count
    - parse_selection_count(): Parse and check free-text input

Key Classes:
    - SelectionCountError: User-facing validation failure

Used By:
    - selection.controller: bulk select/deselect
    - gui.widgets.bulk_select_overlay: input handling
"""

from __future__ import annotations

import re
from typing import Any

# Largest count the input accepts (QSpinBox/int32 range)
MAX_SELECTION_COUNT = 2_147_483_647

INVALID_COUNT_MESSAGE = "Please enter a valid number greater than 0"

# Plain digits, or digits grouped in threes by commas ("1,000")
_COUNT_PATTERN = re.compile(r"[+-]?(?:\d{1,3}(?:,\d{3})+|\d+)")


class SelectionCountError(ValueError):
    """Requested row count is missing, non-numeric or out of range."""

    def __init__(self, message: str = INVALID_COUNT_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def validate_selection_count(count: Any) -> int:
    """
    Ensure a bulk count is a usable positive integer.

    Args:
        count: Candidate count

    Returns:
        The count, unchanged

    Raises:
        SelectionCountError: If count is None, not an int, a bool,
            not positive, or above MAX_SELECTION_COUNT
    """
    if count is None or isinstance(count, bool) or not isinstance(count, int):
        raise SelectionCountError()
    if count <= 0:
        raise SelectionCountError()
    if count > MAX_SELECTION_COUNT:
        raise SelectionCountError(
            f"Please enter a number no larger than {MAX_SELECTION_COUNT:,}"
        )
    return count


def parse_selection_count(text: Any) -> int:
    """
    Parse free-text input into a bulk count.

    Example:
        >>> parse_selection_count(" 20 ")
        20
        >>> parse_selection_count("abc")
        Traceback (most recent call last):
        ...
        artwork_browser.selection.count.SelectionCountError: Please enter a valid number greater than 0
    """
    if text is None:
        raise SelectionCountError()
    stripped = str(text).strip()
    if not _COUNT_PATTERN.fullmatch(stripped):
        raise SelectionCountError()
    try:
        count = int(stripped.replace(",", ""))
    except ValueError as e:
        raise SelectionCountError() from e
    return validate_selection_count(count)
