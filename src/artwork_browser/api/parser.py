"""
Module: api.parser

Purpose:
    Parse and validate the JSON body of an artworks page response into
    an ArtworkPage.

Key Functions:
    - parse_page_payload(): Dict payload -> ArtworkPage

Key Classes:
    - ParseError: Exception for malformed payloads

Dependencies:
    - core.models: Artwork, ArtworkPage

Used By:
    - api.client: ArtworkClient.fetch_page()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from artwork_browser.core.models import Artwork, ArtworkPage, PAGE_SIZE

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Error parsing an artworks payload."""
    pass


def parse_page_payload(
    data: Dict[str, Any],
    page_number: int,
    *,
    default_page_size: int = PAGE_SIZE,
) -> ArtworkPage:
    """
    Parse one page response.

    Validates:
    - "data" is a list of records, each with an integer "id"
    - "pagination.total" is a non-negative integer

    Args:
        data: Decoded JSON body
        page_number: Page that was requested
        default_page_size: Used when "pagination.limit" is absent

    Returns:
        ArtworkPage with records in payload order

    Raises:
        ParseError: If required fields are missing or have the wrong type

    Example:
        >>> page = parse_page_payload(
        ...     {"data": [{"id": 1}], "pagination": {"total": 1}}, 1
        ... )
        >>> page.ids
        (1,)
    """
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object for page {page_number}, got {type(data).__name__}")

    raw_records = data.get("data")
    if not isinstance(raw_records, list):
        raise ParseError(f"Missing or invalid 'data' list for page {page_number}")

    pagination = data.get("pagination")
    if not isinstance(pagination, dict) or "total" not in pagination:
        raise ParseError(f"Missing 'pagination.total' for page {page_number}")

    records: List[Artwork] = []
    for index, raw in enumerate(raw_records):
        if not isinstance(raw, dict):
            raise ParseError(f"Record {index} on page {page_number} is not an object")
        try:
            records.append(Artwork.from_dict(raw))
        except KeyError as e:
            raise ParseError(f"Record {index} on page {page_number} has no 'id'") from e
        except TypeError as e:
            raise ParseError(f"Invalid record {index} on page {page_number}: {e}") from e

    try:
        total = int(pagination["total"])
        page_size = int(pagination.get("limit") or default_page_size)
        page = ArtworkPage(
            page_number=page_number,
            records=tuple(records),
            total_count=total,
            page_size=page_size,
        )
    except (ValueError, TypeError) as e:
        raise ParseError(f"Invalid page {page_number}: {e}") from e

    logger.debug(
        f"Parsed page {page_number}: {len(records)} records of {page.total_count} total"
    )
    return page
