"""HTTP utilities for fetching hierarchy scripts with retry logic."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from doxtree.config import (
    DOXTREE_FETCH_BACKOFF_S,
    DOXTREE_FETCH_MAX_RETRIES,
    DOXTREE_FETCH_TIMEOUT_S,
    DOXTREE_USER_AGENT,
)
from doxtree.exceptions import FetchError, SourceNotFoundError
from doxtree.utils.logging_config import get_logger

logger = get_logger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch text from a URL, retrying transient failures with backoff.

    Args:
        url: The URL to fetch.
        client: Optional shared client. A short-lived one is created when
            omitted.

    Returns:
        The decoded response body.

    Raises:
        SourceNotFoundError: On a 404 response.
        FetchError: If the fetch still fails after all retries.
    """
    timeout = httpx.Timeout(DOXTREE_FETCH_TIMEOUT_S)
    headers = {"User-Agent": DOXTREE_USER_AGENT}
    last_exc: Exception | None = None

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        nonlocal last_exc

        for attempt in range(DOXTREE_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code == 404:
                    raise SourceNotFoundError(f"Hierarchy not found at {url}")

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < DOXTREE_FETCH_MAX_RETRIES:
                backoff = DOXTREE_FETCH_BACKOFF_S * (2**attempt)
                logger.debug(
                    "Retrying fetch",
                    extra={"url": url, "attempt": attempt + 1, "backoff_s": backoff, "error": str(last_exc)},
                )
                await asyncio.sleep(backoff)

        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
