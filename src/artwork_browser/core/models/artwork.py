"""
Module: artwork

Purpose:
    Provides the Artwork dataclass, one record from the artworks API,
    plus the display rules used when rendering its optional fields.

Key Functions:
    - Artwork.from_dict(raw): Build from an API record
    - Artwork.display(field): Rendered cell text ("N/A" when missing)

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.page: ArtworkPage.records
    - api.parser: payload parsing
    - gui.models.artwork_table_model: cell rendering
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

MISSING_TEXT = "N/A"

TEXT_FIELDS = ("title", "place_of_origin", "artist_display", "inscriptions")
DATE_FIELDS = ("date_start", "date_end")


@dataclass(frozen=True)
class Artwork:
    """
    A single artwork record (immutable).

    Attributes:
        id: Opaque unique identifier from the API
        title: Artwork title
        place_of_origin: Where the work was made
        artist_display: Free-form artist line
        inscriptions: Inscription text
        date_start: Start year
        date_end: End year

    Example:
        >>> art = Artwork(id=27992, title="A Sunday on La Grande Jatte")
        >>> art.display("title")
        'A Sunday on La Grande Jatte'
        >>> art.display("inscriptions")
        'N/A'
    """

    id: int
    title: Optional[str] = None
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscriptions: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate identifier on construction."""
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"Artwork id must be an int: {self.id!r}")

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Artwork":
        """
        Build an Artwork from one API record.

        Keys other than the known fields are ignored.

        Raises:
            KeyError: If the record has no "id"
            TypeError: If the id is not an integer
        """
        return cls(
            id=raw["id"],
            title=raw.get("title"),
            place_of_origin=raw.get("place_of_origin"),
            artist_display=raw.get("artist_display"),
            inscriptions=raw.get("inscriptions"),
            date_start=raw.get("date_start"),
            date_end=raw.get("date_end"),
        )

    def display(self, field_name: str) -> str:
        """
        Get the rendered text for a field.

        Text fields fall back to "N/A" when absent or empty. Date fields
        fall back only when absent, so a year of 0 still renders.
        """
        value = getattr(self, field_name)
        if field_name in DATE_FIELDS:
            return MISSING_TEXT if value is None else str(value)
        return str(value) if value else MISSING_TEXT
