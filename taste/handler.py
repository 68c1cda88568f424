# taste/handler.py
"""
Request handler - builds the combined music/reading payload.
Handles one invocation from secrets to response, strictly in sequence.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

from .api_caller import APICaller
from .config import Settings, MAX_ARTIST_IDS
from .fetchers import fetch_top_tracks, fetch_artists, fetch_shelf
from .models import SpotifyCredentials, GenreStat, BookEntry
from .processors import collect_artist_ids, tally_genres, process_shelf_response
from .token_manager import TokenManager


class RequestHandler:
    """
    Aggregates Spotify genres and the Goodreads shelf into one payload.

    Any failure (secret store, HTTP, malformed data, empty genre tally)
    propagates; there is no partial result.
    """

    def __init__(
        self,
        secret_store,
        settings: Settings,
        api_caller: Optional[APICaller] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.secret_store = secret_store
        self.settings = settings
        self.api_caller = api_caller or APICaller(timeout=settings.request_timeout)
        self.token_manager = TokenManager(
            secret_store,
            settings.spotify_secret_name,
            self.api_caller,
            clock=clock,
        )
        self.logger = logging.getLogger(self.__class__.__name__)

    def handle(self) -> Dict:
        """
        Run one invocation.

        Returns:
            {"statusCode": 200, "body": {"books": [...], "music": [...]}}
        """
        # Step 1: Load both secrets
        goodreads_key = self.secret_store.read(self.settings.goodreads_secret_name)["key"]
        credentials = SpotifyCredentials.from_secret(
            self.secret_store.read(self.settings.spotify_secret_name)
        )

        # Step 2: Refresh the Spotify token if it has expired
        credentials = self.token_manager.ensure_fresh(credentials)

        # Step 3: Genres from top tracks
        music = self.build_music_stats(credentials.access_token)

        # Step 4: Books on the shelf
        books = self.build_reading_list(goodreads_key)

        self.logger.info(f"Stats built: {len(books)} books, {len(music)} genres")

        return {
            "statusCode": 200,
            "body": {
                "books": [book.to_dict() for book in books],
                "music": [genre.to_dict() for genre in music],
            },
        }

    def build_music_stats(self, access_token: str) -> List[GenreStat]:
        tracks = fetch_top_tracks(access_token, self.api_caller, time_range="short_term", limit=50)

        artist_ids = collect_artist_ids(tracks, limit=MAX_ARTIST_IDS)
        self.logger.info(f"Looking up {len(artist_ids)} artists from {len(tracks)} tracks")

        artists = fetch_artists(artist_ids, access_token, self.api_caller)
        return tally_genres(artists)

    def build_reading_list(self, api_key: str) -> List[BookEntry]:
        xml = fetch_shelf(
            api_key,
            self.settings.goodreads_user_id,
            self.settings.goodreads_shelf,
            self.api_caller,
        )
        books = process_shelf_response(xml)
        self.logger.info(f"Shelf {self.settings.goodreads_shelf}: {len(books)} books")
        return books
