"""HTTP access to publisher holdings files."""

from __future__ import annotations

import logging

import requests

from .errors import FetchError

logger = logging.getLogger(__name__)

# Some publishers reject non-browser agents.
USER_AGENT = "Mozilla/5.0"
DEFAULT_TIMEOUT_SECONDS = 30


def fetch_url(url: str, *, timeout: int = DEFAULT_TIMEOUT_SECONDS, user_agent: str = USER_AGENT) -> requests.Response:
    """GET ``url`` and return the response, raising :class:`FetchError` unless it is 2xx."""
    logger.debug("Fetching holdings file: %s", url)
    try:
        response = requests.get(url, timeout=timeout, headers={"User-Agent": user_agent})
    except requests.RequestException as exc:
        raise FetchError(None, url, str(exc)) from exc
    if not 200 <= response.status_code < 300:
        raise FetchError(response.status_code, url)
    return response
