"""
Base classes and interfaces for the Mapbox geocoding client.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TransportResponse:
    """Raw outcome of one HTTP GET."""

    status: int
    body: str


class GeocodingError(Exception):
    """Exception raised when geocoding fails."""

    def __init__(self, message: str, dataset: str = "", query: str = ""):
        self.message = message
        self.dataset = dataset
        self.query = query
        super().__init__(message)


class ConfigurationError(GeocodingError):
    """Token, dataset or query missing. Raised before any request is made."""


class TransportError(GeocodingError):
    """Network level failure (connection, DNS, timeout)."""

    def __init__(self, cause: BaseException, dataset: str = "", query: str = ""):
        self.cause = cause
        super().__init__(f"request failed: {cause}", dataset=dataset, query=query)


class ProtocolError(GeocodingError):
    """
    The API answered with a non-200 status.

    `payload` is the parsed JSON error body, or the raw text when the body
    is not JSON.
    """

    def __init__(self, status: int, payload: Any, dataset: str = "", query: str = ""):
        self.status = status
        self.payload = payload
        detail = payload.get("message") if isinstance(payload, dict) else None
        message = f"HTTP {status}: {detail}" if detail else f"HTTP {status}"
        super().__init__(message, dataset=dataset, query=query)


class DecodeError(GeocodingError):
    """The API answered 200 but the body is not valid JSON."""

    def __init__(self, body: str, dataset: str = "", query: str = ""):
        self.body = body
        super().__init__("response body is not valid JSON", dataset=dataset, query=query)


class Transport(ABC):
    """
    Abstract HTTP transport used by the client.

    Subclasses must implement:
    - get(): Issue one GET and return status and raw body

    Network failures are raised as exceptions; HTTP error statuses are
    returned normally so the client can classify them.
    """

    @abstractmethod
    async def get(self, url: str) -> TransportResponse:
        """
        Fetch a URL.

        Args:
            url: Fully built request URL

        Returns:
            TransportResponse with status code and body text
        """
        pass

    async def close(self) -> None:
        """Release any pooled connections."""
        return None


def describe_error(error: Optional[BaseException]) -> str:
    """Short human readable form of an error for logs and the CLI."""
    if error is None:
        return ""
    if isinstance(error, GeocodingError):
        return error.message
    return f"{type(error).__name__}: {error}"
