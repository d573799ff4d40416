"""
Best-effort logo download.

A failed fetch (network error, timeout, non-2xx status) is logged and
returned as an empty result; it never raises to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogoResult:
    data: Optional[bytes] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None


async def fetch_logo(url: str, *, client: Optional[httpx.AsyncClient] = None, timeout: float = 5.0) -> LogoResult:
    """
    Download the logo image at `url`.

    Args:
        url: Absolute image URL; an empty value skips the fetch
        client: Optional shared client (tests inject one with a mock transport)
        timeout: Request timeout in seconds when no client is given

    Returns:
        LogoResult with `data` set on success, `error` set otherwise
    """
    if not url:
        return LogoResult(error="no logo url configured")

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as own_client:
                response = await own_client.get(url)
        else:
            response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        message = f"Failed to fetch logo: HTTP {exc.response.status_code}"
        logger.warning("%s (%s)", message, url)
        return LogoResult(error=message)
    except httpx.HTTPError as exc:
        message = f"Failed to fetch logo: {exc.__class__.__name__}: {exc}"
        logger.warning("%s (%s)", message, url)
        return LogoResult(error=message)

    return LogoResult(data=response.content)
