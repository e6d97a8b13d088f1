"""Download raw SP-API model specs over HTTP.

All network calls share one httpx.AsyncClient; each call is wrapped in its
own wall-clock deadline so a stalled server cannot hang the run.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Awaitable

import httpx

from .config import CodegenConfig
from .errors import FetchError, HttpError, RequestTimeoutError
from .workspace import write_spec


def build_client(config: CodegenConfig, **kwargs: Any) -> httpx.AsyncClient:
    """Create the shared AsyncClient.

    The transport timeout is the longest per-call bound; the per-call
    deadline in bounded_request is what actually cancels.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(max(config.fetch_timeout, config.convert_timeout)),
        follow_redirects=True,
        headers={"User-Agent": config.user_agent},
        **kwargs,
    )


async def bounded_request(
    request: Awaitable[httpx.Response], url: str, timeout: float
) -> httpx.Response:
    """Await *request* for at most *timeout* seconds.

    On expiry the request is cancelled and RequestTimeoutError raised.
    """
    try:
        return await asyncio.wait_for(request, timeout=timeout)
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        raise RequestTimeoutError(url, timeout) from exc
    except httpx.RequestError as exc:
        raise FetchError(f"Request to {url} failed: {exc}") from exc


def raise_for_status(response: httpx.Response, url: str) -> None:
    if not response.is_success:
        raise HttpError(response.status_code, response.reason_phrase, url)


async def fetch(
    client: httpx.AsyncClient,
    url: str,
    destination: Path,
    timeout: float = 60.0,
) -> None:
    """GET *url* and write the body verbatim to *destination*."""
    response = await bounded_request(client.get(url), url, timeout)
    raise_for_status(response, url)
    write_spec(destination, response.content)
