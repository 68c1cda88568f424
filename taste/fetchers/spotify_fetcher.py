# taste/fetchers/spotify_fetcher.py
"""
Spotify Web API fetcher.
"""

import logging
from typing import Dict, List

from ..api_caller import APICaller
from ..exceptions import UpstreamError
from ..models import SpotifyCredentials, Track, Artist

TOKEN_URL = "https://accounts.spotify.com/api/token"
TOP_TRACKS_URL = "https://api.spotify.com/v1/me/top/tracks"
ARTISTS_URL = "https://api.spotify.com/v1/artists"

logger = logging.getLogger(__name__)


def _bearer(access_token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {access_token}"}


def refresh_access_token(credentials: SpotifyCredentials, api_caller: APICaller) -> Dict:
    """
    Exchange the stored refresh token for a new access token.

    Spotify wants the client id and secret base64-encoded in a Basic
    Authorization header.

    Returns:
        Raw JSON token response; always contains "access_token"
    """
    data = api_caller.post_form(
        TOKEN_URL,
        data={
            "grant_type": "refresh_token",
            "refresh_token": credentials.refresh_token,
        },
        headers={"Authorization": credentials.basic_auth_header()},
    )

    if not data.get("access_token"):
        raise UpstreamError("Token response has no access_token", url=TOKEN_URL)

    return data


def fetch_top_tracks(
    access_token: str,
    api_caller: APICaller,
    time_range: str = "short_term",
    limit: int = 50,
) -> List[Track]:
    """Fetch the user's top tracks for the given window"""
    data = api_caller.get_json(
        TOP_TRACKS_URL,
        params={"time_range": time_range, "limit": limit},
        headers=_bearer(access_token),
    )

    try:
        tracks = [
            Track(artist_ids=[artist["id"] for artist in item["artists"]])
            for item in data["items"]
        ]
    except (KeyError, TypeError) as e:
        raise UpstreamError(f"Malformed top tracks response: missing {e}", url=TOP_TRACKS_URL) from e

    logger.info(f"Fetched {len(tracks)} top tracks ({time_range})")
    return tracks


def fetch_artists(artist_ids: List[str], access_token: str, api_caller: APICaller) -> List[Artist]:
    """
    Fetch full artist records in one batched call.

    The endpoint takes at most 50 comma-separated ids; callers cap the list.
    """
    if not artist_ids:
        return []

    data = api_caller.get_json(
        ARTISTS_URL,
        params={"ids": ",".join(artist_ids)},
        headers=_bearer(access_token),
    )

    try:
        artists = [Artist(genres=list(artist["genres"])) for artist in data["artists"]]
    except (KeyError, TypeError) as e:
        raise UpstreamError(f"Malformed artists response: missing {e}", url=ARTISTS_URL) from e

    logger.info(f"Fetched {len(artists)} artists")
    return artists
