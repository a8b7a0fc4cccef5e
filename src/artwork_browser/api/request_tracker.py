"""
Module: api.request_tracker

Purpose:
    Enforce "last request wins" for page loads. Every request gets a
    fresh id; only the newest id is current, so a late response for an
    older page is recognised and dropped.

Key Classes:
    - PageRequestTracker: Request id bookkeeping

Used By:
    - gui.services.page_loader: display page loads
"""

from __future__ import annotations

import itertools
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class PageRequestTracker:
    """
    Track the single current page request.

    Example:
        >>> tracker = PageRequestTracker()
        >>> first = tracker.begin(1)
        >>> second = tracker.begin(2)
        >>> tracker.is_current(first)
        False
        >>> tracker.finish(second)
        True
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._current_id: Optional[int] = None
        self._current_page: Optional[int] = None

    @property
    def pending_page(self) -> Optional[int]:
        """Page of the in-flight request, or None when nothing is pending."""
        return self._current_page

    @property
    def is_loading(self) -> bool:
        return self._current_id is not None

    def begin(self, page_number: int) -> int:
        """Register a new request, superseding any pending one."""
        request_id = next(self._counter)
        if self._current_id is not None:
            logger.debug(
                f"Request {request_id} for page {page_number} supersedes "
                f"request {self._current_id} for page {self._current_page}"
            )
        self._current_id = request_id
        self._current_page = page_number
        return request_id

    def is_current(self, request_id: int) -> bool:
        return request_id == self._current_id

    def finish(self, request_id: int) -> bool:
        """
        Mark a request complete.

        Returns:
            True if the request was current (its result should be applied),
            False if it was superseded
        """
        if not self.is_current(request_id):
            return False
        self._current_id = None
        self._current_page = None
        return True
