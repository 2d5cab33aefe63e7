"""HTTP access to the scores feed."""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .config import REQUEST_TIMEOUT, SCORES_URL, USER_AGENT

logger = logging.getLogger(__name__)

CONNECT = "connect"
TIMEOUT = "timeout"
DECODE = "decode"
UNKNOWN = "unknown"

ERROR_MESSAGES = {
    CONNECT: "ERROR: Can't connect to the API. It might be because your Internet connection is down.",
    TIMEOUT: "ERROR: API timed out. Try again later.",
    DECODE: "ERROR: API returned malformed data. Try again later.",
    UNKNOWN: "ERROR: Unknown error.",
}


class FetchError(RuntimeError):
    """Raised when the scores feed could not be downloaded or decoded."""

    def __init__(self, category: str, detail: str = "") -> None:
        super().__init__(detail or category)
        self.category = category
        self.detail = detail

    @property
    def message(self) -> str:
        return ERROR_MESSAGES.get(self.category, ERROR_MESSAGES[UNKNOWN])


def build_session() -> requests.Session:
    """Return a requests session that identifies the tool."""

    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    return session


def fetch_scores(
    session: Optional[requests.Session] = None,
    url: str = SCORES_URL,
    timeout: float = REQUEST_TIMEOUT,
) -> Any:
    """Download *url* and return the decoded JSON body."""

    session = session or build_session()
    logger.info("Fetching scores: %s", url)
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.ConnectionError as exc:
        raise FetchError(CONNECT, str(exc)) from exc
    except requests.Timeout as exc:
        raise FetchError(TIMEOUT, str(exc)) from exc
    except requests.JSONDecodeError as exc:
        raise FetchError(DECODE, str(exc)) from exc
    except requests.RequestException as exc:
        raise FetchError(UNKNOWN, str(exc)) from exc
