# taste/models/__init__.py
"""
Data models for the stats integration.
"""

from .credentials import SpotifyCredentials
from .music import Track, Artist, GenreStat
from .book import (
    BookEntry,
    ShelfReview,
    ShelfPage,
    EmptyShelf,
    SingleReviewShelf,
    MultiReviewShelf,
)

__all__ = [
    "SpotifyCredentials",
    "Track",
    "Artist",
    "GenreStat",
    "BookEntry",
    "ShelfReview",
    "ShelfPage",
    "EmptyShelf",
    "SingleReviewShelf",
    "MultiReviewShelf"
]
