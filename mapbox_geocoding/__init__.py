"""
Minimal async client for the Mapbox Geocoding v5 API.
"""

from mapbox_geocoding.geocoding import (
    MapboxGeocoder,
    GeocodingError,
    ConfigurationError,
    TransportError,
    ProtocolError,
    DecodeError,
    DATASET_PLACES,
    DATASET_PLACES_PERMANENT,
)

__version__ = "1.0.0"

__all__ = [
    "MapboxGeocoder",
    "GeocodingError",
    "ConfigurationError",
    "TransportError",
    "ProtocolError",
    "DecodeError",
    "DATASET_PLACES",
    "DATASET_PLACES_PERMANENT",
]
