"""
Module: api

Purpose:
    Client for the paginated artworks API. Loads one page of records
    at a time and tracks which request is current.

Key Functions:
    - ArtworkClient.fetch_page(): Load one page
    - parse_page_payload(): Parse a page response body

Dependencies:
    - requests: HTTP
    - artwork_browser.core.models: Artwork, ArtworkPage

Used By:
    - gui.services.page_loader: background loads
"""

from .config import ApiConfig, DEFAULT_API_BASE, API_BASE_ENV_VAR
from .client import (
    ArtworkClient,
    ArtworkApiError,
    ArtworkRequestError,
    ArtworkHTTPError,
    ArtworkResponseError,
)
from .parser import parse_page_payload, ParseError
from .request_tracker import PageRequestTracker

__all__ = [
    "ApiConfig",
    "DEFAULT_API_BASE",
    "API_BASE_ENV_VAR",
    "ArtworkClient",
    "ArtworkApiError",
    "ArtworkRequestError",
    "ArtworkHTTPError",
    "ArtworkResponseError",
    "parse_page_payload",
    "ParseError",
    "PageRequestTracker",
]
