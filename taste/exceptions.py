# taste/exceptions.py
"""
Error types raised by the stats integration.
"""

from typing import Optional


class TasteStatsError(Exception):
    """Base class for errors raised by this package"""


class UpstreamError(TasteStatsError):
    """
    A dependency call did not succeed.

    Raised for network failures, non-2xx responses and payloads that are
    missing fields the integration relies on.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class EmptyGenreTallyError(TasteStatsError):
    """No genre survived the frequency filter, so there is no maximum to scale against"""
