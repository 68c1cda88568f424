# taste/config.py
"""
Runtime configuration, read from the Lambda environment.
"""

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Mapping, Optional

# Spotify access tokens live for one hour
TOKEN_LIFETIME = timedelta(hours=1)

# Batch limit of the Spotify artists endpoint
MAX_ARTIST_IDS = 50

# Genres seen this many times or fewer are dropped
GENRE_FREQUENCY_FLOOR = 3

DEFAULT_GOODREADS_SECRET_NAME = "goodreads-api-key"
DEFAULT_SPOTIFY_SECRET_NAME = "spotify-credentials"
DEFAULT_SHELF = "currently-reading"
DEFAULT_TIMEOUT = 10


@dataclass(frozen=True)
class Settings:
    """Settings for a single stats invocation"""
    goodreads_user_id: str
    goodreads_secret_name: str = DEFAULT_GOODREADS_SECRET_NAME
    spotify_secret_name: str = DEFAULT_SPOTIFY_SECRET_NAME
    goodreads_shelf: str = DEFAULT_SHELF
    aws_region: Optional[str] = None
    request_timeout: int = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        GOODREADS_USER_ID is required; everything else has a default.
        """
        env = os.environ if environ is None else environ

        return cls(
            goodreads_user_id=env["GOODREADS_USER_ID"],
            goodreads_secret_name=env.get("GOODREADS_SECRET_NAME", DEFAULT_GOODREADS_SECRET_NAME),
            spotify_secret_name=env.get("SPOTIFY_SECRET_NAME", DEFAULT_SPOTIFY_SECRET_NAME),
            goodreads_shelf=env.get("GOODREADS_SHELF", DEFAULT_SHELF),
            aws_region=env.get("AWS_REGION") or None,
            request_timeout=int(env.get("REQUEST_TIMEOUT", DEFAULT_TIMEOUT)),
            log_level=env.get("LOG_LEVEL", "INFO"),
        )
