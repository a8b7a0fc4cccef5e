"""
Paginator and header text helpers.

Pure functions so the footer and header widgets stay thin and the
arithmetic can be tested without a QApplication.
"""
from __future__ import annotations

import math
from typing import List, Tuple

from artwork_browser.selection import SelectionSnapshot

# Maximum number of numbered page buttons shown at once
MAX_PAGE_BUTTONS = 5


def total_pages(total_count: int, page_size: int) -> int:
    """Number of pages needed for total_count records."""
    if total_count <= 0 or page_size <= 0:
        return 0
    return math.ceil(total_count / page_size)


def page_window(current_page: int, page_count: int, max_buttons: int = MAX_PAGE_BUTTONS) -> List[int]:
    """
    Page numbers to show as buttons, centred on the current page.

    Example:
        >>> page_window(1, 10)
        [1, 2, 3, 4, 5]
        >>> page_window(6, 10)
        [4, 5, 6, 7, 8]
        >>> page_window(10, 10)
        [6, 7, 8, 9, 10]
    """
    if page_count <= 0 or max_buttons <= 0:
        return []

    start = max(1, current_page - max_buttons // 2)
    end = min(page_count, start + max_buttons - 1)
    # Near the end: slide the window back so it stays full
    if end - start < max_buttons - 1:
        start = max(1, end - max_buttons + 1)
    return list(range(start, end + 1))


def showing_range(current_page: int, page_size: int, total_count: int) -> Tuple[int, int]:
    """
    1-based record range shown on a page, as (first, last).

    Returns (0, 0) when there is nothing to show.
    """
    if total_count <= 0 or current_page < 1:
        return (0, 0)
    first = (current_page - 1) * page_size + 1
    if first > total_count:
        return (0, 0)
    last = min(current_page * page_size, total_count)
    return (first, last)


def showing_text(current_page: int, page_size: int, total_count: int) -> str:
    first, last = showing_range(current_page, page_size, total_count)
    return f"Showing {first} to {last} of {max(total_count, 0)} entries"


def selection_summary_text(snapshot: SelectionSnapshot) -> str:
    """
    Header text for the current selection.

    Example:
        "Selected: 12 rows (selecting 20 across pages, 8 remaining)"
    """
    text = f"Selected: {snapshot.selected_count} rows"
    if snapshot.is_pursuing and snapshot.remaining > 0:
        text += (
            f" (selecting {snapshot.target} across pages, "
            f"{snapshot.remaining} remaining)"
        )
    return text
