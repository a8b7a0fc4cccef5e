"""
Background page loading for the GUI.

Two channels share one worker type:
- display loads (request_page): last request wins; superseded
  responses are dropped via PageRequestTracker
- scan loads (request_scan): pages fetched for a bulk selection
  without being displayed; at most one in flight, tagged with the
  pursuit generation that asked for it

Workers only fetch. Results come back through queued signals, so the
selection controller is only ever touched on the GUI thread.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Set

from PySide6.QtCore import QObject, QThread, Signal

from artwork_browser.api import ArtworkApiError, ArtworkClient, PageRequestTracker
from artwork_browser.core.models import ArtworkPage

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], ArtworkClient]


class PageLoadWorker(QThread):
    """Fetch one page on a worker thread."""

    # request_id, ArtworkPage
    loaded = Signal(int, object)
    # request_id, page_number, message
    failed = Signal(int, int, str)

    def __init__(self, client_factory: ClientFactory, page_number: int, request_id: int, parent=None):
        super().__init__(parent)
        self._client_factory = client_factory
        self.page_number = page_number
        self.request_id = request_id

    def run(self):
        try:
            with self._client_factory() as client:
                page = client.fetch_page(self.page_number)
        except ArtworkApiError as e:
            logger.error(f"Failed to load artworks page {self.page_number}: {e}")
            self.failed.emit(self.request_id, self.page_number, str(e))
        except Exception as e:
            logger.exception(f"Unexpected error loading artworks page {self.page_number}")
            self.failed.emit(self.request_id, self.page_number, f"Unexpected error: {e}")
        else:
            self.loaded.emit(self.request_id, page)


class PageLoader(QObject):
    """
    Starts page loads and filters their results.

    Signals:
        pageLoaded(ArtworkPage): newest display request succeeded
        pageFailed(int, str): newest display request failed
        loadingChanged(bool): display load started / finished
        scanLoaded(int, ArtworkPage): scan finished (generation, page)
        scanFailed(int, int, str): scan failed (generation, page, message)
    """

    pageLoaded = Signal(object)
    pageFailed = Signal(int, str)
    loadingChanged = Signal(bool)
    scanLoaded = Signal(int, object)
    scanFailed = Signal(int, int, str)

    def __init__(self, client_factory: ClientFactory, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._client_factory = client_factory
        self._tracker = PageRequestTracker()
        self._scan_generation: Optional[int] = None
        self._scan_page: Optional[int] = None
        self._workers: Set[PageLoadWorker] = set()

    @property
    def is_loading(self) -> bool:
        return self._tracker.is_loading

    @property
    def pending_page(self) -> Optional[int]:
        """Page of the current display request, if one is in flight."""
        return self._tracker.pending_page

    @property
    def is_scanning(self) -> bool:
        return self._scan_generation is not None

    @property
    def scanning_page(self) -> Optional[int]:
        return self._scan_page

    def request_page(self, page_number: int) -> int:
        """
        Load a page for display, superseding any pending display load.

        Returns:
            The request id
        """
        was_loading = self._tracker.is_loading
        request_id = self._tracker.begin(page_number)
        worker = self._start_worker(page_number, request_id)
        worker.loaded.connect(self._on_page_loaded)
        worker.failed.connect(self._on_page_failed)
        worker.start()
        if not was_loading:
            self.loadingChanged.emit(True)
        return request_id

    def request_scan(self, page_number: int, generation: int) -> bool:
        """
        Load a page for a bulk selection without displaying it.

        Returns:
            False if a scan is already in flight (nothing started)
        """
        if self.is_scanning:
            return False
        self._scan_generation = generation
        self._scan_page = page_number
        worker = self._start_worker(page_number, generation)
        worker.loaded.connect(self._on_scan_loaded)
        worker.failed.connect(self._on_scan_failed)
        worker.start()
        logger.debug(f"Scanning page {page_number} for bulk selection {generation}")
        return True

    def shutdown(self, timeout_ms: int = 5000) -> None:
        """Wait for running workers before the window goes away."""
        for worker in list(self._workers):
            worker.wait(timeout_ms)

    # -- Worker plumbing -----------------------------------------------------

    def _start_worker(self, page_number: int, request_id: int) -> PageLoadWorker:
        worker = PageLoadWorker(self._client_factory, page_number, request_id)
        self._workers.add(worker)
        worker.finished.connect(self._release_worker)
        return worker

    def _release_worker(self) -> None:
        worker = self.sender()
        if worker in self._workers:
            self._workers.discard(worker)
            worker.deleteLater()

    def _on_page_loaded(self, request_id: int, page: ArtworkPage) -> None:
        if not self._tracker.finish(request_id):
            logger.debug(f"Dropping stale response for page {page.page_number}")
            return
        self.loadingChanged.emit(False)
        self.pageLoaded.emit(page)

    def _on_page_failed(self, request_id: int, page_number: int, message: str) -> None:
        if not self._tracker.finish(request_id):
            logger.debug(f"Ignoring failure of superseded request for page {page_number}")
            return
        self.loadingChanged.emit(False)
        self.pageFailed.emit(page_number, message)

    def _on_scan_loaded(self, generation: int, page: ArtworkPage) -> None:
        self._scan_generation = None
        self._scan_page = None
        self.scanLoaded.emit(generation, page)

    def _on_scan_failed(self, generation: int, page_number: int, message: str) -> None:
        self._scan_generation = None
        self._scan_page = None
        self.scanFailed.emit(generation, page_number, message)
