# services/lookup/fetcher.py
"""
HTTP fetch collaborator for the supplementary dictionary page.

``get`` never raises for HTTP error statuses – it reports them through
``FetchResponse.ok`` – but transport errors (DNS, connection reset,
timeouts) propagate to the caller.
"""

from typing import Optional, Protocol

import httpx
from loguru import logger
from pydantic import BaseModel

from core.config import get_settings


class FetchResponse(BaseModel):
    ok: bool
    status_code: int = 0
    data: str = ""


class PageFetcher(Protocol):
    async def get(self, url: str) -> FetchResponse:
        ...


class HttpxPageFetcher:
    """
    Fetches pages with ``httpx.AsyncClient``.

    The body is decoded with ``encoding`` (Latin-1 by default) regardless of
    the charset the server declares; titles taken from it are repaired later.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        encoding: Optional[str] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.encoding = encoding or settings.PAGE_ENCODING
        self.user_agent = user_agent or settings.DEFAULT_USER_AGENT
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
            transport=self._transport,
        )

    async def get(self, url: str) -> FetchResponse:
        async with self._client() as client:
            resp = await client.get(url)

        logger.debug(f"GET {url} → {resp.status_code} ({len(resp.content)} bytes)")
        return FetchResponse(
            ok=resp.is_success,
            status_code=resp.status_code,
            data=resp.content.decode(self.encoding, errors="replace"),
        )
