# taste/fetchers/goodreads_fetcher.py
"""
Goodreads API fetcher.
"""

import logging

from ..api_caller import APICaller

SHELF_URL = "https://www.goodreads.com/review/list"

logger = logging.getLogger(__name__)


def fetch_shelf(api_key: str, user_id: str, shelf: str, api_caller: APICaller) -> str:
    """
    Fetch one of the user's shelves.

    Args:
        api_key: Goodreads developer key
        user_id: Goodreads user whose shelf is listed
        shelf: Shelf name, e.g. "currently-reading"
        api_caller: Configured API caller

    Returns:
        Raw XML body of the review/list response
    """
    params = {
        "v": 2,
        "id": user_id,
        "key": api_key,
        "shelf": shelf,
    }

    xml = api_caller.get_text(SHELF_URL, params=params)
    logger.debug(f"Goodreads shelf {shelf}: {len(xml)} bytes")
    return xml
