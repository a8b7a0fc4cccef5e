"""
Module: selection.controller

Purpose:
    Cross-page selection bookkeeping. Keeps the global set of selected
    artwork ids, reconciles per-page checkbox reports against it, and
    pursues bulk "select N rows" targets across pages that are loaded
    one at a time.

Key Classes:
    - SelectionController: The stateful controller (no Qt dependency)
    - SelectionState: IDLE / PURSUING
    - SelectionSnapshot: Read-only view for rendering

Algorithm:
    Bulk selection counts the TOTAL selection size, including ids picked
    earlier on other pages. A pursuit scans pages in a fixed order:
    the page displayed when the request was made, then increasing page
    numbers to the last page, then wrapping to page 1 up to the origin.
    Pages reach the pursuit two ways:
    1. The GUI fetches next_page_to_scan() in the background and hands
       the result to offer_page()
    2. The user navigates and the page arrives through show_page()
    Each page is consumed at most once per pursuit, in record order,
    whichever route delivers it. Navigation can change which pages are
    consumed first, and so which ids make up the target.
    The pursuit ends (IDLE) when the target is met, when every page
    has been scanned, or when a manual deselection cancels it.

Dependencies:
    - core.models: ArtworkPage
    - selection.count: count validation

Used By:
    - gui.main_window: MainWindow
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set

from artwork_browser.core.models import ArtworkPage

from .count import validate_selection_count

logger = logging.getLogger(__name__)


class SelectionState(Enum):
    """Controller state."""

    IDLE = auto()       # No pending bulk target
    PURSUING = auto()   # Working toward a bulk target across pages


@dataclass(frozen=True)
class SelectionSnapshot:
    """
    Immutable view of controller state for rendering.

    Attributes:
        state: IDLE or PURSUING
        target: Bulk target while pursuing, else None
        selected_count: Size of the global selection set
        scanned_pages: Pages the active pursuit has consumed
    """

    state: SelectionState
    target: Optional[int]
    selected_count: int
    scanned_pages: FrozenSet[int] = frozenset()

    @property
    def is_pursuing(self) -> bool:
        return self.state is SelectionState.PURSUING

    @property
    def remaining(self) -> int:
        """Ids still needed to meet the target (0 when idle)."""
        if self.target is None:
            return 0
        return max(0, self.target - self.selected_count)


@dataclass
class _Pursuit:
    """Mutable bookkeeping for one bulk-selection request."""

    target: int
    origin_page: int
    generation: int
    total_pages: Optional[int] = None  # Unknown until a page arrives
    empty_page: Optional[int] = None   # Lowest page seen with no records
    scanned: Set[int] = field(default_factory=set)

    @property
    def last_page(self) -> Optional[int]:
        if self.total_pages is None:
            return None
        if self.empty_page is not None:
            return min(self.total_pages, self.empty_page - 1)
        return self.total_pages

    def scan_order(self) -> Iterator[int]:
        last = self.last_page
        if last is None:
            yield self.origin_page
            return
        yield from range(self.origin_page, last + 1)
        yield from range(1, min(self.origin_page, last + 1))


class SelectionController:
    """
    Stateful selection logic for a paginated artwork table.

    Only one page window is resident at a time. The selection set may
    reference ids from pages that are not displayed.

    Example:
        >>> controller = SelectionController()
        >>> controller.show_page(page_one)           # 12 records, 30 total
        0
        >>> controller.request_bulk_select(20)
        12
        >>> controller.next_page_to_scan()
        2
        >>> controller.offer_page(page_two)
        8
        >>> controller.state
        <SelectionState.IDLE: 1>
    """

    def __init__(self) -> None:
        self._selected: Set[int] = set()
        self._page: Optional[ArtworkPage] = None
        self._pursuit: Optional[_Pursuit] = None
        self._generation = 0

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> SelectionState:
        return SelectionState.IDLE if self._pursuit is None else SelectionState.PURSUING

    @property
    def is_pursuing(self) -> bool:
        return self._pursuit is not None

    @property
    def target(self) -> Optional[int]:
        return self._pursuit.target if self._pursuit else None

    @property
    def pursuit_generation(self) -> Optional[int]:
        """Identifies the active pursuit; None when idle."""
        return self._pursuit.generation if self._pursuit else None

    @property
    def current_page(self) -> Optional[ArtworkPage]:
        return self._page

    @property
    def selected_ids(self) -> FrozenSet[int]:
        return frozenset(self._selected)

    @property
    def selected_count(self) -> int:
        return len(self._selected)

    def is_selected(self, record_id: int) -> bool:
        return record_id in self._selected

    def selected_on_page(self) -> List[int]:
        """Selected ids on the current page, in page order."""
        if self._page is None:
            return []
        return [rid for rid in self._page.ids if rid in self._selected]

    def snapshot(self) -> SelectionSnapshot:
        return SelectionSnapshot(
            state=self.state,
            target=self.target,
            selected_count=len(self._selected),
            scanned_pages=frozenset(self._pursuit.scanned) if self._pursuit else frozenset(),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Page delivery
    # ─────────────────────────────────────────────────────────────────────────

    def show_page(self, page: ArtworkPage) -> int:
        """
        Replace the displayed page window.

        While pursuing, the page tops up the selection (once per pursuit).

        Returns:
            Number of ids added by the top-up
        """
        self._page = page
        logger.debug(f"Showing page {page.page_number} ({len(page.records)} records)")
        if self._pursuit is None:
            return 0
        return self._top_up(page)

    def offer_page(self, page: ArtworkPage) -> int:
        """
        Top up from a page loaded in the background for the pursuit.

        The displayed page window is not changed. Ignored when idle.

        Returns:
            Number of ids added
        """
        if self._pursuit is None:
            logger.debug(f"Ignoring page {page.page_number}: no bulk selection pending")
            return 0
        return self._top_up(page)

    def next_page_to_scan(self) -> Optional[int]:
        """Next page the pursuit still needs, or None when idle or exhausted."""
        if self._pursuit is None:
            return None
        for page_number in self._pursuit.scan_order():
            if page_number not in self._pursuit.scanned:
                return page_number
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # User operations
    # ─────────────────────────────────────────────────────────────────────────

    def apply_page_selection(self, checked_ids: Iterable[int]) -> None:
        """
        Reconcile the checkbox state reported for the current page.

        The page's previous selection is cleared and replaced by exactly
        checked_ids. A drop in the page's selected count is a manual
        deselection and cancels any pending bulk target.

        Args:
            checked_ids: All ids checked on the visible page
        """
        if self._page is None:
            logger.warning("Selection change reported with no page displayed")
            return

        page_ids = set(self._page.ids)
        checked = set(checked_ids)
        foreign = checked - page_ids
        if foreign:
            logger.warning(
                f"Ignoring {len(foreign)} checked ids not on page {self._page.page_number}"
            )
            checked &= page_ids

        before = len(page_ids & self._selected)
        self._selected -= page_ids
        self._selected |= checked

        if self._pursuit is not None and len(checked) < before:
            self.cancel_pursuit("manual deselection")
            return
        self._check_pursuit_complete()

    def request_bulk_select(self, count: int) -> int:
        """
        Start pursuing a total of `count` selected ids.

        Selects from the current page first (page order), then relies on
        further pages arriving through offer_page()/show_page().

        Args:
            count: Desired total selection size

        Returns:
            Number of ids added from the current page

        Raises:
            SelectionCountError: If count is invalid (state unchanged)
        """
        validate_selection_count(count)

        self._generation += 1
        origin = self._page.page_number if self._page else 1
        self._pursuit = _Pursuit(
            target=count,
            origin_page=origin,
            generation=self._generation,
        )
        logger.info(
            f"Bulk selection started: target {count}, "
            f"{len(self._selected)} already selected, starting at page {origin}"
        )

        if self._page is None:
            self._check_pursuit_complete()
            return 0
        return self._top_up(self._page)

    def request_bulk_deselect(self, count: int) -> int:
        """
        Deselect up to `count` ids from the current page, in page order.

        Other pages and any pending bulk target are untouched.

        Returns:
            Number of ids removed

        Raises:
            SelectionCountError: If count is invalid (state unchanged)
        """
        validate_selection_count(count)
        if self._page is None:
            return 0

        removed = 0
        for record_id in self._page.ids:
            if removed >= count:
                break
            if record_id in self._selected:
                self._selected.discard(record_id)
                removed += 1

        logger.info(f"Deselected {removed} rows on page {self._page.page_number}")
        return removed

    def cancel_pursuit(self, reason: str = "cancelled") -> bool:
        """
        Drop any pending bulk target.

        Returns:
            True if a pursuit was active
        """
        if self._pursuit is None:
            return False
        logger.info(
            f"Bulk selection of {self._pursuit.target} cancelled ({reason}) "
            f"at {len(self._selected)} selected"
        )
        self._pursuit = None
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _top_up(self, page: ArtworkPage) -> int:
        pursuit = self._pursuit
        if page.page_number in pursuit.scanned:
            return 0

        pursuit.scanned.add(page.page_number)
        pursuit.total_pages = page.total_pages
        if page.is_empty:
            if pursuit.empty_page is None or page.page_number < pursuit.empty_page:
                pursuit.empty_page = page.page_number

        added = 0
        for record_id in page.ids:
            if len(self._selected) >= pursuit.target:
                break
            if record_id not in self._selected:
                self._selected.add(record_id)
                added += 1

        logger.info(
            f"Page {page.page_number} contributed {added} rows "
            f"({len(self._selected)}/{pursuit.target} selected)"
        )
        self._check_pursuit_complete()
        return added

    def _check_pursuit_complete(self) -> None:
        pursuit = self._pursuit
        if pursuit is None:
            return
        if len(self._selected) >= pursuit.target:
            logger.info(f"Bulk selection target {pursuit.target} reached")
            self._pursuit = None
        elif self.next_page_to_scan() is None:
            logger.info(
                f"Bulk selection stopped at {len(self._selected)} of {pursuit.target}: "
                f"no more pages"
            )
            self._pursuit = None
