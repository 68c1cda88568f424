# taste/processors/__init__.py
"""
Response processors that turn raw upstream data into output entries.
"""

from .genre_processor import collect_artist_ids, tally_genres
from .shelf_processor import decode_shelf, normalize_shelf, process_shelf_response

__all__ = [
    "collect_artist_ids",
    "tally_genres",
    "decode_shelf",
    "normalize_shelf",
    "process_shelf_response"
]
