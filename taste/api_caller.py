# taste/api_caller.py
"""
HTTP caller shared by the Spotify and Goodreads fetchers.
"""

import logging
from typing import Dict, Optional

import requests

from .exceptions import UpstreamError


class APICaller:
    """
    Makes blocking HTTP calls and turns every failure into an UpstreamError.

    There is no retry or backoff: a single failed call fails the invocation.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: int = 10):
        self.session = session or requests.Session()
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    def get_json(self, url: str, params: Optional[Dict] = None, headers: Optional[Dict] = None) -> Dict:
        """GET a JSON document"""
        response = self._request("GET", url, params=params, headers=headers)
        return self._decode_json(response, url)

    def get_text(self, url: str, params: Optional[Dict] = None, headers: Optional[Dict] = None) -> str:
        """GET a text document (Goodreads answers in XML)"""
        response = self._request("GET", url, params=params, headers=headers)
        return response.text

    def post_form(self, url: str, data: Dict, headers: Optional[Dict] = None) -> Dict:
        """POST a form-encoded body and decode the JSON reply"""
        form_headers = {"Content-Type": "application/x-www-form-urlencoded"}
        form_headers.update(headers or {})

        response = self._request("POST", url, data=data, headers=form_headers)
        return self._decode_json(response, url)

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        self.logger.debug(f"{method} {url}")

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            self.logger.error(f"Timeout for {url}")
            raise UpstreamError(f"Timeout calling {url}", url=url) from e
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Request failed for {url}: {e}")
            raise UpstreamError(f"Request to {url} failed: {e}", url=url) from e

        if not 200 <= response.status_code < 300:
            self.logger.warning(f"Status {response.status_code} for {url}")
            raise UpstreamError(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code,
                url=url,
            )

        return response

    def _decode_json(self, response: requests.Response, url: str) -> Dict:
        try:
            return response.json()
        except ValueError as e:
            self.logger.warning(f"Invalid JSON response from {url}")
            raise UpstreamError(
                f"Invalid JSON response from {url}",
                status_code=response.status_code,
                url=url,
            ) from e
