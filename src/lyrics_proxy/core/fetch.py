"""
HTTP fetching for lyrics providers.

This module intentionally contains only network logic:
- requests
- timeouts
- status checks

No parsing. No heuristics. No provider-specific semantics. Each call makes
exactly one attempt; a failed attempt is reported, never retried.
"""

from typing import Any, Optional

import requests  # type: ignore[import-untyped]

from ..config import BROWSER_USER_AGENT, REQUEST_TIMEOUT
from ..exceptions import ProviderUnavailable
from ..utils.logging import get_logger

logger = get_logger(__name__)


def _get(
    url: str,
    headers: dict,
    timeout: float,
    session: Optional[requests.Session],
) -> requests.Response:
    sess = session or requests
    try:
        resp = sess.get(url, headers=headers, timeout=timeout)
        resp.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.debug(f"GET {url} failed: {e}")
        raise ProviderUnavailable(f"Request to {url} failed: {e}") from e
    return resp


def fetch_html(
    url: str,
    *,
    headers: Optional[dict] = None,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Fetch a page and return its raw text.

    Raises ProviderUnavailable on transport failure or a non-2xx status.
    """
    headers = headers or {"User-Agent": BROWSER_USER_AGENT}
    timeout = REQUEST_TIMEOUT if timeout is None else timeout
    return _get(url, headers, timeout, session).text


def fetch_json(
    url: str,
    *,
    headers: Optional[dict] = None,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> Any:
    """
    Fetch JSON from a URL and return the decoded body.

    Raises ProviderUnavailable on transport failure, a non-2xx status, or a
    body that is not valid JSON.
    """
    headers = headers or {}
    timeout = REQUEST_TIMEOUT if timeout is None else timeout
    resp = _get(url, headers, timeout, session)
    try:
        return resp.json()
    except ValueError as e:
        # requests' JSONDecodeError subclasses ValueError
        raise ProviderUnavailable(f"Malformed JSON from {url}: {e}") from e
