"""
HTTP transports for the Mapbox client.

AiohttpTransport is the default and runs natively on the event loop.
RequestsTransport uses a blocking requests.Session in a worker thread,
for callers that already depend on requests adapters or proxies.
"""

import asyncio
import logging
from typing import Optional

import aiohttp
import requests

from mapbox_geocoding.core import settings
from mapbox_geocoding.geocoding.base import Transport, TransportResponse

logger = logging.getLogger(__name__)


class AiohttpTransport(Transport):
    """
    aiohttp based transport.

    Usage:
        transport = AiohttpTransport(timeout=5)
        response = await transport.get(url)

    A session passed in is reused and left open; otherwise a short-lived
    session is opened per request.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self._session = session

    async def get(self, url: str) -> TransportResponse:
        client_timeout = aiohttp.ClientTimeout(total=self.timeout)

        if self._session is not None:
            return await self._fetch(self._session, url, client_timeout)

        connector = aiohttp.TCPConnector(limit=5)
        async with aiohttp.ClientSession(connector=connector) as session:
            return await self._fetch(session, url, client_timeout)

    async def _fetch(
        self,
        session: aiohttp.ClientSession,
        url: str,
        timeout: aiohttp.ClientTimeout,
    ) -> TransportResponse:
        async with session.get(url, timeout=timeout) as response:
            body = await response.text()
            logger.debug(f"GET returned HTTP {response.status} ({len(body)} bytes)")
            return TransportResponse(status=response.status, body=body)


class RequestsTransport(Transport):
    """
    requests based transport, executed off the event loop.

    Usage:
        transport = RequestsTransport()
        geocoder = MapboxGeocoder(token, transport=transport)
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.session = session or requests.Session()

    def _get_sync(self, url: str) -> TransportResponse:
        response = self.session.get(url, timeout=self.timeout)
        logger.debug(f"GET returned HTTP {response.status_code} ({len(response.text)} bytes)")
        return TransportResponse(status=response.status_code, body=response.text)

    async def get(self, url: str) -> TransportResponse:
        return await asyncio.to_thread(self._get_sync, url)

    async def close(self) -> None:
        self.session.close()
