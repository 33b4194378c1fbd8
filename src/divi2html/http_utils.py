"""Resilient GET requests against the WordPress REST API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Final, Mapping

import httpx

from divi2html.config import (
    DIVI2HTML_FETCH_BACKOFF_S,
    DIVI2HTML_FETCH_MAX_RETRIES,
    DIVI2HTML_FETCH_TIMEOUT_S,
    DIVI2HTML_USER_AGENT,
)
from divi2html.exceptions import AuthenticationError, FetchError, RateLimitError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})
AUTH_STATUS_CODES: Final[frozenset[int]] = frozenset({401, 403})

_MAX_REDIRECTS: Final[int] = 5


def _transient_error(url: str, status_code: int) -> FetchError:
    exc_class = RateLimitError if status_code == 429 else FetchError
    return exc_class(f"HTTP {status_code} from {url}")


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    params: Mapping[str, str] | None = None,
    auth: httpx.Auth | tuple[str, str] | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> str:
    """GET ``url`` and return the body, retrying transient failures.

    Network errors and 429/5xx responses are retried with exponential
    backoff. 401/403 and 404 fail immediately.

    Args:
        url: Resource to fetch.
        client: Shared client; a short-lived one is created when omitted.
        params: Query string parameters.
        auth: Credentials, e.g. ``httpx.BasicAuth`` with an application password.
        on_404: Exception class raised for 404 responses (``FetchError`` by default).
        on_404_message: Message for the 404 exception.

    Raises:
        AuthenticationError: On 401/403.
        RateLimitError: If the host still answers 429 after the last retry.
        FetchError: If every attempt failed.
    """
    request_kwargs: dict[str, Any] = {}
    if params:
        request_kwargs["params"] = dict(params)
    if auth is not None:
        request_kwargs["auth"] = auth

    async def attempt_all(http_client: httpx.AsyncClient) -> str:
        failure: Exception | None = None
        for attempt in range(DIVI2HTML_FETCH_MAX_RETRIES + 1):
            if attempt:
                delay = DIVI2HTML_FETCH_BACKOFF_S * 2 ** (attempt - 1)
                logger.debug("Retrying %s in %.2fs after: %s", url, delay, failure)
                await asyncio.sleep(delay)

            try:
                response = await http_client.get(url, **request_kwargs)
            except httpx.RequestError as exc:
                failure = exc
                continue

            status_code = response.status_code
            if status_code == 404:
                raise (on_404 or FetchError)(on_404_message or f"Resource not found at {url}")
            if status_code in AUTH_STATUS_CODES:
                raise AuthenticationError(f"HTTP {status_code} from {url}: check WordPress credentials")
            if status_code in RETRY_STATUS_CODES:
                failure = _transient_error(url, status_code)
                continue

            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                failure = exc
                continue
            return response.text

        final_class = RateLimitError if isinstance(failure, RateLimitError) else FetchError
        raise final_class(f"Failed to fetch {url}: {failure}")

    if client is not None:
        return await attempt_all(client)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(DIVI2HTML_FETCH_TIMEOUT_S),
        headers={"User-Agent": DIVI2HTML_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as owned_client:
        return await attempt_all(owned_client)
