"""Authenticated download of one day's puzzle input."""

from __future__ import annotations

import logging
import time
from typing import Protocol

import requests

from mush.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from mush.errors import MissingCredentialError, ReadFailedError, RequestFailedError, ServerError
from mush.utils.time_utils import elapsed_ms

LOGGER = logging.getLogger(__name__)


class HttpGetter(Protocol):
    """The slice of ``requests.Session`` used by the fetcher."""

    def get(self, url: str, *, headers: dict[str, str], timeout: float) -> requests.Response: ...


def build_input_url(day: int, year: int, base_url: str = DEFAULT_BASE_URL) -> str:
    """Return ``{base_url}/{year}/day/{day}/input`` (day is not zero-padded)."""

    return f"{base_url.rstrip('/')}/{year}/day/{day}/input"


def fetch_input(
    day: int,
    year: int,
    base_url: str,
    session_token: str | None,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout_seconds: float = 30.0,
    http: HttpGetter | None = None,
    logger: logging.Logger | None = None,
) -> str:
    """Fetch the puzzle input text for one day.

    The body is returned verbatim, trailing newlines included. Raises a
    ``FetchError`` subclass on any failure; there are no retries.
    """

    effective_logger = logger or LOGGER
    if not session_token:
        raise MissingCredentialError()

    url = build_input_url(day, year, base_url)
    headers = {
        "Cookie": f"session={session_token}",
        "User-Agent": user_agent,
    }

    started = time.perf_counter()
    try:
        if http is None:
            with requests.Session() as owned:
                response = owned.get(url, headers=headers, timeout=timeout_seconds)
        else:
            response = http.get(url, headers=headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        effective_logger.warning("fetch.request_failed url=%s error=%s", url, exc)
        raise RequestFailedError(url, exc) from exc

    status_code = int(response.status_code)
    if not 200 <= status_code < 300:
        effective_logger.warning("fetch.server_error url=%s status=%s", url, status_code)
        raise ServerError(status_code, url)

    try:
        text = response.content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ReadFailedError(f"cannot decode response body from {url}: {exc}") from exc

    effective_logger.info(
        "fetch.done url=%s bytes=%s elapsed_ms=%.1f",
        url,
        len(response.content),
        elapsed_ms(started),
    )
    return text
