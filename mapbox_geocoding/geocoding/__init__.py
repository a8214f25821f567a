"""
Mapbox geocoding client.

Provides forward and reverse geocoding against the Mapbox places datasets:
- MapboxGeocoder: per-instance configuration (token, proximity, bbox)
- Transports: aiohttp (default) or requests
- Facade: settings-driven convenience functions

Usage:
    from mapbox_geocoding.geocoding import MapboxGeocoder, geocode_address

    # Using the client directly
    geocoder = MapboxGeocoder("pk.abc")
    data = await geocoder.geocode("mapbox.places", "360 Plantation St")

    # Using convenience function (reads MAPBOX_ACCESS_TOKEN)
    data = await geocode_address("360 Plantation St")
"""

from mapbox_geocoding.geocoding.base import (
    TransportResponse,
    Transport,
    GeocodingError,
    ConfigurationError,
    TransportError,
    ProtocolError,
    DecodeError,
)
from mapbox_geocoding.geocoding.client import (
    BASE_URL,
    DATASET_PLACES,
    DATASET_PLACES_PERMANENT,
    MapboxGeocoder,
)
from mapbox_geocoding.geocoding.transports import AiohttpTransport, RequestsTransport
from mapbox_geocoding.geocoding.facade import (
    get_geocoder,
    geocode_address,
    reverse_geocode_point,
)

__all__ = [
    # Base classes
    "TransportResponse",
    "Transport",
    # Errors
    "GeocodingError",
    "ConfigurationError",
    "TransportError",
    "ProtocolError",
    "DecodeError",
    # Client
    "BASE_URL",
    "DATASET_PLACES",
    "DATASET_PLACES_PERMANENT",
    "MapboxGeocoder",
    # Transports
    "AiohttpTransport",
    "RequestsTransport",
    # Convenience functions
    "get_geocoder",
    "geocode_address",
    "reverse_geocode_point",
]
