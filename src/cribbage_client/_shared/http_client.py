# Area: Shared
"""
cribbage_client._shared.http_client — HTTP transport
=====================================================

Thin wrapper around a requests.Session bound to the game server's
base URL. Every failure (connection, timeout, HTTP error status,
unreadable body) is raised as a TransportError carrying the most
useful message available:

1. The `message` field of a JSON error body
2. The plain-text error body
3. A generic network-failure message

Requests are never retried here: game actions are not idempotent,
so a retry must be an explicit user action.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter

from ..errors import TransportError
from ..types import ErrorBody

logger = logging.getLogger("cribbage_client.http")

GENERIC_FAILURE = "Network request failed"
DEFAULT_TIMEOUT = 10.0


def build_session() -> requests.Session:
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({"Accept": "application/json"})
    return session


class HttpClient:
    """JSON-over-HTTP client for the game server."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session if session is not None else build_session()

    def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params)

    def post_json(self, path: str, body: Dict[str, Any]) -> Any:
        return self._request("POST", path, json=body)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(f"{method} {url}")
        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(GENERIC_FAILURE, url=url) from e

        if response.status_code >= 400:
            message = error_message(response)
            logger.error(f"{method} {url} -> {response.status_code}: {message}")
            raise TransportError(message, status_code=response.status_code, url=url)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {url} returned a non-JSON body")
            raise TransportError(
                "Malformed response from server",
                status_code=response.status_code,
                url=url,
            ) from e


def error_message(response: requests.Response) -> str:
    """Best human-readable message from an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error_body: ErrorBody = body
        message = error_body.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    elif isinstance(body, str) and body.strip():
        return body.strip()

    text = (response.text or "").strip()
    if text and body is None:
        return text
    return GENERIC_FAILURE
