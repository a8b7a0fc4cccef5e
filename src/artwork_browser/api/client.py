"""
Module: api.client

Purpose:
    Fetch one page of artworks at a time from the remote API.
    Pure request/response: no caching, no retry.

Key Functions:
    - ArtworkClient.fetch_page(): GET <base>?page=<n> -> ArtworkPage

Key Classes:
    - ArtworkClient: Session-backed client
    - ArtworkApiError: Base exception for load failures
    - ArtworkRequestError: Network failure or timeout
    - ArtworkHTTPError: Non-success HTTP status
    - ArtworkResponseError: Body is not a valid page payload

Dependencies:
    - requests: HTTP session
    - api.config: ApiConfig
    - api.parser: parse_page_payload

Used By:
    - gui.services.page_loader: background page loads
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import ApiConfig
from .parser import ParseError, parse_page_payload
from artwork_browser.core.models import ArtworkPage

logger = logging.getLogger(__name__)


class ArtworkApiError(Exception):
    """Error loading a page of artworks."""

    def __init__(self, message: str, page_number: Optional[int] = None) -> None:
        super().__init__(message)
        self.page_number = page_number


class ArtworkRequestError(ArtworkApiError):
    """The request never produced a response (connection error, timeout)."""
    pass


class ArtworkHTTPError(ArtworkApiError):
    """The API answered with a non-success status."""

    def __init__(self, message: str, page_number: Optional[int] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message, page_number)
        self.status_code = status_code


class ArtworkResponseError(ArtworkApiError):
    """The API answered, but not with a usable page payload."""
    pass


class ArtworkClient:
    """
    Client for the paginated artworks endpoint.

    Holds one requests.Session for connection reuse. Safe to call from
    a single worker thread at a time per page load.

    Example:
        >>> with ArtworkClient() as client:
        ...     page = client.fetch_page(1)
        >>> len(page.records)
        12
    """

    def __init__(self, config: Optional[ApiConfig] = None, session: Optional[requests.Session] = None):
        """
        Initialize client.

        Args:
            config: API configuration (defaults to ApiConfig.from_env())
            session: Session to use (a new one is created if omitted)
        """
        self.config = config or ApiConfig.from_env()
        self._session = session or requests.Session()
        self._session.headers.setdefault("Accept", "application/json")

    def fetch_page(self, page_number: int) -> ArtworkPage:
        """
        Load a single page.

        Args:
            page_number: 1-based page index

        Returns:
            ArtworkPage with records in API order

        Raises:
            ValueError: If page_number < 1
            ArtworkRequestError: On connection failure or timeout
            ArtworkHTTPError: On non-success HTTP status
            ArtworkResponseError: If the body is not a valid payload
        """
        if isinstance(page_number, bool) or not isinstance(page_number, int) or page_number < 1:
            raise ValueError(f"page_number must be a positive integer: {page_number!r}")

        url = self.config.base_url
        logger.info(f"Fetching artworks page {page_number}")

        try:
            response = self._session.get(
                url,
                params={"page": page_number},
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise ArtworkHTTPError(
                f"HTTP error {status} loading page {page_number}",
                page_number,
                status_code=status,
            ) from e
        except (requests.ConnectionError, requests.Timeout) as e:
            raise ArtworkRequestError(f"Could not reach artworks API for page {page_number}: {e}", page_number) from e
        except requests.RequestException as e:
            raise ArtworkRequestError(f"Request for page {page_number} failed: {e}", page_number) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ArtworkResponseError(f"Page {page_number} response is not JSON: {e}", page_number) from e

        try:
            page = parse_page_payload(
                payload,
                page_number,
                default_page_size=self.config.page_size,
            )
        except ParseError as e:
            raise ArtworkResponseError(str(e), page_number) from e

        logger.info(
            f"Loaded page {page_number}/{page.total_pages} "
            f"({len(page.records)} records, {page.total_count} total)"
        )
        return page

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "ArtworkClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
