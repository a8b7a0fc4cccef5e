"""
Artwork Browser Core Package

Shared data models for artworks and the pages they arrive in.
"""

from .models import Artwork, ArtworkPage, MISSING_TEXT, PAGE_SIZE

__all__ = [
    "Artwork",
    "ArtworkPage",
    "MISSING_TEXT",
    "PAGE_SIZE",
]
