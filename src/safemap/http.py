"""Shared HTTP session with retry/backoff for provider fetchers."""

from __future__ import annotations

import logging
from typing import Any

from requests import RequestException, Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from safemap import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"SafeMap/{__version__}"


def create_session(
    retries: int = 2,
    backoff_factor: float = 0.5,
    status_forcelist: tuple[int, ...] = (429, 500, 502, 503, 504),
) -> Session:
    """Create a requests Session with exponential backoff retry.

    Retries only GET requests for the listed status codes.  A User-Agent is
    always sent; Nominatim rejects anonymous clients.
    """
    retry = Retry(
        total=retries,
        backoff_factor=backoff_factor,
        status_forcelist=status_forcelist,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session = Session()
    session.headers["User-Agent"] = USER_AGENT
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def get_json(
    session: Session,
    url: str,
    params: dict[str, str | int] | None = None,
    timeout: int = 10,
    label: str = "",
) -> Any | None:
    """GET *url* and decode JSON, returning None on any upstream failure.

    Non-200 responses, network errors and undecodable bodies are logged and
    absorbed here so that callers can substitute their documented fallback.
    """
    label = label or url
    try:
        resp = session.get(url, params=params, timeout=timeout)
        if resp.status_code != 200:
            logger.warning("%s returned %d", label, resp.status_code)
            return None
        return resp.json()
    except (RequestException, ValueError):
        logger.warning("Request to %s failed", label, exc_info=True)
        return None
