# taste/__init__.py
"""
Spotify + Goodreads stats for a personal website.

Primary interfaces:
- RequestHandler: One invocation, secrets in, payload out
- SecretStore: Secrets Manager access
- Settings: Environment-driven configuration

Building blocks:
- TokenManager: Spotify token refresh and persistence
- APICaller: HTTP calls that fail with UpstreamError
"""

from .config import Settings
from .exceptions import TasteStatsError, UpstreamError, EmptyGenreTallyError
from .api_caller import APICaller
from .secret_store import SecretStore
from .token_manager import TokenManager
from .handler import RequestHandler
from .models import SpotifyCredentials, GenreStat, BookEntry

__all__ = [
    # Primary interface
    "RequestHandler",
    "SecretStore",
    "Settings",

    # Building blocks
    "TokenManager",
    "APICaller",
    "SpotifyCredentials",
    "GenreStat",
    "BookEntry",

    # Errors
    "TasteStatsError",
    "UpstreamError",
    "EmptyGenreTallyError"
]
