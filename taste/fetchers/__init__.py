# taste/fetchers/__init__.py
"""
Data fetchers for the two upstream services.
"""

from .spotify_fetcher import refresh_access_token, fetch_top_tracks, fetch_artists
from .goodreads_fetcher import fetch_shelf

__all__ = ["refresh_access_token", "fetch_top_tracks", "fetch_artists", "fetch_shelf"]
