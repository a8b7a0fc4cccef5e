"""
Module: page

Purpose:
    Provides ArtworkPage, the page window returned by one API call.
    Only the currently displayed page is ever held in memory.

Key Functions:
    - ArtworkPage.ids: Record ids in page order
    - ArtworkPage.total_pages: Page count derived from total_count

Dependencies:
    - core.models.artwork: Artwork

Used By:
    - api.client: fetch_page() result
    - selection.controller: page window and scanning
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cached_property
from typing import Tuple

from .artwork import Artwork

PAGE_SIZE = 12


@dataclass(frozen=True)
class ArtworkPage:
    """
    One page of artworks (immutable).

    Attributes:
        page_number: 1-based page index
        records: Artworks in API order
        total_count: Total records across all pages
        page_size: Records per full page

    Invariants:
        - page_number >= 1
        - total_count >= 0
        - record ids are unique within the page
    """

    page_number: int
    records: Tuple[Artwork, ...]
    total_count: int
    page_size: int = PAGE_SIZE

    def __post_init__(self) -> None:
        """Validate page on construction."""
        if self.page_number < 1:
            raise ValueError(f"page_number must be >= 1: {self.page_number}")
        if self.total_count < 0:
            raise ValueError(f"total_count must be non-negative: {self.total_count}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive: {self.page_size}")
        if len(set(self.ids)) != len(self.records):
            raise ValueError(f"Duplicate record ids on page {self.page_number}")

    @cached_property
    def ids(self) -> Tuple[int, ...]:
        """Record ids in page order."""
        return tuple(record.id for record in self.records)

    @property
    def total_pages(self) -> int:
        """Number of pages implied by total_count."""
        return math.ceil(self.total_count / self.page_size)

    @property
    def is_empty(self) -> bool:
        return not self.records

    def contains(self, record_id: int) -> bool:
        return record_id in self.ids
