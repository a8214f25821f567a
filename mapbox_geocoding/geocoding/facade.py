"""
Geocoding facade providing a settings-driven interface to the client.
"""

import logging
from typing import Any, Optional

from mapbox_geocoding.core import settings
from mapbox_geocoding.geocoding.base import Transport
from mapbox_geocoding.geocoding.client import MapboxGeocoder
from mapbox_geocoding.geocoding.transports import AiohttpTransport

logger = logging.getLogger(__name__)


def get_geocoder(
    access_token: Optional[str] = None,
    transport: Optional[Transport] = None,
) -> MapboxGeocoder:
    """
    Build a geocoder from settings.

    Args:
        access_token: Overrides MAPBOX_ACCESS_TOKEN when given
        transport: Overrides the default aiohttp transport

    Returns:
        Configured MapboxGeocoder instance
    """
    token = access_token or settings.MAPBOX_ACCESS_TOKEN
    if not token:
        logger.warning("MAPBOX_ACCESS_TOKEN not configured")

    return MapboxGeocoder(
        access_token=token or None,
        search_center=settings.search_center,
        search_bounds=settings.search_bounds,
        transport=transport or AiohttpTransport(timeout=settings.HTTP_TIMEOUT),
        base_url=settings.MAPBOX_BASE_URL,
        country=settings.MAPBOX_COUNTRY,
        legacy_proximity=settings.MAPBOX_LEGACY_PROXIMITY,
    )


async def geocode_address(
    address: str,
    dataset: Optional[str] = None,
    geocoder: Optional[MapboxGeocoder] = None,
) -> Any:
    """
    Geocode a single address with the configured defaults.

    Example:
        data = await geocode_address("360 Plantation St, Worcester, MA")
        first = data["features"][0]["center"]
    """
    geocoder = geocoder or get_geocoder()
    return await geocoder.geocode(dataset or settings.MAPBOX_DATASET, address)


async def reverse_geocode_point(
    lng: float,
    lat: float,
    dataset: Optional[str] = None,
    geocoder: Optional[MapboxGeocoder] = None,
) -> Any:
    """Reverse geocode a point with the configured defaults."""
    geocoder = geocoder or get_geocoder()
    return await geocoder.reverse_geocode(dataset or settings.MAPBOX_DATASET, lng, lat)
