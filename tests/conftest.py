import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import artwork_browser
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widgets are created in tests; no display is needed
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from artwork_browser.core.models import Artwork, ArtworkPage, PAGE_SIZE  # noqa: E402


def build_page(page_number: int, total_count: int, page_size: int = PAGE_SIZE) -> ArtworkPage:
    """
    Build the page a real API would return for a collection of
    total_count records with ids 1..total_count.
    """
    first = (page_number - 1) * page_size + 1
    last = min(page_number * page_size, total_count)
    records = tuple(
        Artwork(id=i, title=f"Artwork {i}")
        for i in range(first, last + 1)
    )
    return ArtworkPage(
        page_number=page_number,
        records=records,
        total_count=total_count,
        page_size=page_size,
    )


# Common test fixtures
@pytest.fixture
def make_page():
    """Factory for ArtworkPage objects with sequential ids."""
    return build_page


@pytest.fixture
def sample_artwork():
    return Artwork(
        id=27992,
        title="A Sunday on La Grande Jatte",
        place_of_origin="France",
        artist_display="Georges Seurat\nFrench, 1859-1891",
        inscriptions=None,
        date_start=1884,
        date_end=1886,
    )


@pytest.fixture
def sample_payload():
    """A decoded page response in the API's shape."""
    return {
        "pagination": {"total": 30, "limit": 12, "offset": 0, "total_pages": 3, "current_page": 1},
        "data": [
            {
                "id": 100 + i,
                "title": f"Artwork {i}",
                "place_of_origin": "France",
                "artist_display": "Unknown",
                "inscriptions": None,
                "date_start": 1900,
                "date_end": 1901,
                "api_link": f"https://api.artic.edu/api/v1/artworks/{100 + i}",
            }
            for i in range(12)
        ],
    }
