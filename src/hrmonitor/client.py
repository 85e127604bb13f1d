"""Fetch capability for the measurement service (httpx-based)."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from .models import MonitorResponse

logger = logging.getLogger(__name__)


class ResultFetcher(Protocol):
    async def fetch_monitoring_result(self, url: str) -> MonitorResponse:
        """GET `url` and return its status and raw body.

        Raises on transport failure (connection refused, timeout, ...). A
        non-success status is returned, not raised.
        """
        ...


class HttpResultFetcher:
    """Single GET per call, no retry.

    A shared `httpx.AsyncClient` may be injected (tests pass one with a mock
    transport); otherwise a short-lived client is created per request.
    """

    def __init__(
        self,
        timeout_sec: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout_sec = timeout_sec
        self._client = client

    async def _get(self, client: httpx.AsyncClient, url: str) -> MonitorResponse:
        resp = await client.get(url)
        logger.info("[FETCH] status %d", resp.status_code)
        return MonitorResponse(status_code=resp.status_code, body=resp.content)

    async def fetch_monitoring_result(self, url: str) -> MonitorResponse:
        if self._client is not None:
            return await self._get(self._client, url)
        async with httpx.AsyncClient(timeout=self.timeout_sec) as client:
            return await self._get(client, url)
