"""
Module: selection

Purpose:
    Cross-page selection for the artwork table. Tracks selected ids
    independently of the displayed page and pursues bulk selection
    targets as pages are loaded.

Key Classes:
    - SelectionController: Stateful controller
    - SelectionState: IDLE / PURSUING
    - SelectionSnapshot: Read-only state view
    - SelectionCountError: Invalid bulk count

Used By:
    - gui.main_window: MainWindow
    - gui.widgets.bulk_select_overlay: input validation
"""

from .controller import SelectionController, SelectionState, SelectionSnapshot
from .count import (
    SelectionCountError,
    parse_selection_count,
    validate_selection_count,
    MAX_SELECTION_COUNT,
    INVALID_COUNT_MESSAGE,
)

__all__ = [
    "SelectionController",
    "SelectionState",
    "SelectionSnapshot",
    "SelectionCountError",
    "parse_selection_count",
    "validate_selection_count",
    "MAX_SELECTION_COUNT",
    "INVALID_COUNT_MESSAGE",
]
