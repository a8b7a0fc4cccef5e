"""
Core Models Package

Immutable, validated data models shared by the API client, the
selection controller and the GUI.

All models in this package are frozen dataclasses, so a page can be
handed from a loader thread to the GUI thread without copying.
"""

from .artwork import Artwork, MISSING_TEXT
from .page import ArtworkPage, PAGE_SIZE

__all__ = [
    "Artwork",
    "ArtworkPage",
    "MISSING_TEXT",
    "PAGE_SIZE",
]
