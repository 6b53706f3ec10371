# SPDX-License-Identifier: MIT
"""Wrapper for making requests"""

from . import VERSION, logger

import requests
from requests_ratelimiter import LimiterSession
from typing import Optional

req_session = LimiterSession(per_second=3)

HEADERS = {
    "User-Agent": f"emojicatalog {VERSION}",
    "Accept": "application/json",
}


class CatalogError(Exception):
    """Base class for errors raised while loading the catalog."""


class RequestError(CatalogError):
    """
    Raised when a request fails.

    ``status_code`` holds the HTTP status for non-success responses and is
    None for network-level failures.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(CatalogError):
    """Raised when a response body is not the JSON we expect."""


def request_get(url: str, parse_json: bool = False):
    """
    Send a GET request and return the response body.

    :param url: URL to request.
    :param parse_json: decode the body as JSON instead of returning text.
    :raises RequestError: on a non-200 status or a transport failure.
    :raises ParseError: if ``parse_json`` is set and the body is not JSON.
    """
    try:
        req = req_session.get(
            url,
            headers=HEADERS,
        )
    except requests.RequestException as e:
        raise RequestError(f"Network error: {e}") from e

    if req.status_code != 200:
        logger.warning(f"Request error for {url}: {req.status_code}")
        logger.debug("Server response:\n" + req.text)
        raise RequestError(f"HTTP error! Status: {req.status_code}", req.status_code)

    if parse_json:
        try:
            return req.json()
        except ValueError as e:
            raise ParseError(f"Malformed JSON from {url}: {e}") from e

    return req.text
