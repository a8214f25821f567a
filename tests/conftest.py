import json
from typing import List, Optional, Union

import pytest

from mapbox_geocoding.geocoding.base import Transport, TransportResponse
from mapbox_geocoding.geocoding.client import MapboxGeocoder


class FakeTransport(Transport):
    """In-memory transport that records URLs and replays a canned outcome."""

    def __init__(
        self,
        status: int = 200,
        body: Union[str, dict, list] = '{"features": []}',
        error: Optional[Exception] = None,
    ):
        self.status = status
        self.body = body if isinstance(body, str) else json.dumps(body)
        self.error = error
        self.urls: List[str] = []
        self.closed = False

    async def get(self, url: str) -> TransportResponse:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return TransportResponse(status=self.status, body=self.body)

    async def close(self) -> None:
        self.closed = True


class DoneRecorder:
    """Callable collecting every (error, data) delivery."""

    def __init__(self):
        self.calls = []

    def __call__(self, error, data):
        self.calls.append((error, data))


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def geocoder(transport: FakeTransport) -> MapboxGeocoder:
    return MapboxGeocoder(access_token="tok123", transport=transport)


@pytest.fixture
def done() -> DoneRecorder:
    return DoneRecorder()
