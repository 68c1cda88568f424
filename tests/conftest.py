"""Shared fixtures: fake secret store, fake HTTP session, fixed clock."""
import json
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest
import requests

from taste.api_caller import APICaller
from taste.config import Settings

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

TOKEN_URL = "https://accounts.spotify.com/api/token"
TOP_TRACKS_URL = "https://api.spotify.com/v1/me/top/tracks"
ARTISTS_URL = "https://api.spotify.com/v1/artists"
SHELF_URL = "https://www.goodreads.com/review/list"


def make_response(status_code: int = 200, json_body=None, text: Optional[str] = None) -> requests.Response:
    """Build a real requests.Response with a canned body."""
    response = requests.Response()
    response.status_code = status_code
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeSession:
    """Stands in for requests.Session; answers by (method, url) and records calls."""

    def __init__(self):
        self.routes: Dict = {}
        self.calls: List[Dict] = []

    def add(self, method: str, url: str, response):
        self.routes[(method, url)] = response

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, "timeout": timeout, **kwargs})
        answer = self.routes.get((method, url))
        if answer is None:
            return make_response(404, text="not found")
        if isinstance(answer, Exception):
            raise answer
        return answer

    def calls_to(self, method: str, url: str) -> List[Dict]:
        return [c for c in self.calls if c["method"] == method and c["url"] == url]


class FakeSecretStore:
    """In-memory secret store with the same read/write surface as SecretStore."""

    def __init__(self, secrets: Optional[Dict] = None):
        self.secrets = {name: json.dumps(value) for name, value in (secrets or {}).items()}
        self.writes: List = []

    def read(self, name):
        return json.loads(self.secrets[name])

    def write(self, name, value):
        self.writes.append((name, value))
        self.secrets[name] = json.dumps(value)


def shelf_xml(books: List[Dict], total: Optional[int] = None) -> str:
    """Render a Goodreads review/list v2 response."""
    total = len(books) if total is None else total
    reviews = []
    for i, book in enumerate(books, start=1):
        authors = "".join(
            f"<author><id>{100 + j}</id><name>{name}</name><role></role></author>"
            for j, name in enumerate(book.get("authors", []))
        )
        image = book.get("image")
        reviews.append(
            "<review>"
            f"<id>{9000 + i}</id>"
            "<book>"
            f"<id type=\"integer\">{i}</id>"
            f"<title>{book['title']}</title>"
            f"<title_without_series>{book['title']}</title_without_series>"
            f"<small_image_url>{image or ''}</small_image_url>"
            f"<link>{book['url']}</link>"
            f"<authors>{authors}</authors>"
            "<work><id>1</id><uri>kca://work/1</uri></work>"
            "</book>"
            "<shelves><shelf name=\"currently-reading\" /></shelves>"
            "</review>"
        )
    return (
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>"
        "<GoodreadsResponse>"
        "<Request><authentication>true</authentication><key><![CDATA[key]]></key>"
        "<method><![CDATA[review_list]]></method></Request>"
        f"<reviews start=\"1\" end=\"{len(books)}\" total=\"{total}\">"
        + "".join(reviews)
        + "</reviews></GoodreadsResponse>"
    )


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def api_caller(session):
    return APICaller(session=session, timeout=5)


@pytest.fixture
def settings():
    return Settings(goodreads_user_id="26737737")


@pytest.fixture
def spotify_secret():
    return {
        "client_id": "client-id",
        "client_secret": "client-secret",
        "refresh_token": "refresh-token",
        "access_token": "stale-token",
        "expires_at": "2024-05-01T11:00:00+00:00",
    }
