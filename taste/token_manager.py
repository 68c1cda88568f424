# taste/token_manager.py
"""
Keeps the Spotify access token in the secret store usable.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .api_caller import APICaller
from .config import TOKEN_LIFETIME
from .fetchers import refresh_access_token
from .models import SpotifyCredentials


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenManager:
    """
    Refreshes an expired Spotify token and persists the new bundle.

    Two states: a valid token is returned as-is, an expired one is exchanged
    once through the token endpoint and written back before use. Nothing is
    written when the exchange fails.
    """

    def __init__(
        self,
        secret_store,
        secret_name: str,
        api_caller: APICaller,
        clock: Optional[Callable[[], datetime]] = None,
        lifetime: timedelta = TOKEN_LIFETIME,
    ):
        self.secret_store = secret_store
        self.secret_name = secret_name
        self.api_caller = api_caller
        self.clock = clock or utcnow
        self.lifetime = lifetime
        self.logger = logging.getLogger(self.__class__.__name__)

    def ensure_fresh(self, credentials: SpotifyCredentials) -> SpotifyCredentials:
        now = self.clock()

        if not credentials.is_expired(now):
            self.logger.debug("Spotify access token still valid")
            return credentials

        self.logger.info(f"Spotify access token expired at {credentials.expires_at}, refreshing")
        token_response = refresh_access_token(credentials, self.api_caller)

        refreshed = credentials.with_refreshed_token(
            access_token=token_response["access_token"],
            now=now,
            lifetime=self.lifetime,
            refresh_token=token_response.get("refresh_token"),
        )
        self.secret_store.write(self.secret_name, refreshed.to_secret())

        self.logger.info(f"Spotify access token refreshed, valid until {refreshed.expires_at}")
        return refreshed
