"""
Mapbox Geocoding v5 client.

Forward and reverse geocoding against the Mapbox places datasets.
https://docs.mapbox.com/api/search/geocoding-v5/
"""

import json
import logging
from typing import Any, Callable, Optional, Sequence

from mapbox_geocoding.core.utils.geo import (
    Bounds,
    Center,
    Number,
    format_coordinates,
    normalize_bounds,
    normalize_center,
)
from mapbox_geocoding.geocoding.base import (
    ConfigurationError,
    DecodeError,
    GeocodingError,
    ProtocolError,
    Transport,
    TransportError,
)
from mapbox_geocoding.geocoding.transports import AiohttpTransport

logger = logging.getLogger(__name__)

BASE_URL = "https://api.mapbox.com/geocoding/v5/"

# Temporary vs permanent-storage places indexes
DATASET_PLACES = "mapbox.places"
DATASET_PLACES_PERMANENT = "mapbox.places-permanent"

DoneCallback = Callable[[Optional[BaseException], Any], None]


class MapboxGeocoder:
    """
    Client for the Mapbox geocoding endpoint.

    Configuration lives on the instance: set the token once, optionally a
    proximity center and a bounding box, then issue any number of queries.
    Concurrent queries read whatever configuration is current when they
    build their URL.

    Usage:
        geocoder = MapboxGeocoder("pk.abc")
        geocoder.set_search_bounds([-71.9, 42.2, -71.7, 42.35])
        data = await geocoder.geocode(DATASET_PLACES, "360 Plantation St")

    Errors are raised as GeocodingError subclasses. Passing `done` switches
    to callback delivery: done(error, None) or done(None, data), called once.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        search_center: Optional[Sequence[Number]] = None,
        search_bounds: Optional[Sequence[Number]] = None,
        transport: Optional[Transport] = None,
        base_url: str = BASE_URL,
        country: str = "US",
        legacy_proximity: bool = False,
    ):
        """
        Initialize the client.

        Args:
            access_token: Mapbox public access token
            search_center: (lng, lat) used to bias results by proximity
            search_bounds: (min_lng, min_lat, max_lng, max_lat) filter
            transport: HTTP transport (defaults to AiohttpTransport)
            base_url: Geocoding endpoint root, with trailing slash
            country: Country filter sent with every query
            legacy_proximity: Send the center as a bare "&lng,lat" segment
                instead of "&proximity=lng,lat"
        """
        self.transport = transport or AiohttpTransport()
        self.base_url = base_url
        self.country = country
        self.legacy_proximity = legacy_proximity
        self.access_token: Optional[str] = None
        self.search_center: Optional[Center] = None
        self.search_bounds: Optional[Bounds] = None

        self.set_access_token(access_token)
        self.set_search_center(search_center)
        self.set_search_bounds(search_bounds)

    def set_access_token(self, access_token: Optional[str]) -> None:
        self.access_token = access_token

    def set_search_center(self, center: Optional[Sequence[Number]]) -> None:
        """Set the (lng, lat) proximity bias. None clears it."""
        self.search_center = normalize_center(center)

    def set_search_bounds(self, bbox: Optional[Sequence[Number]]) -> None:
        """Set the (min_lng, min_lat, max_lng, max_lat) filter. None clears it."""
        self.search_bounds = normalize_bounds(bbox)

    def build_url(self, dataset: str, query: str, redact: bool = False) -> str:
        """
        Build the request URL for a dataset and location expression.

        Dataset and query are inserted as given, without URL encoding.
        With `redact` the token is written as "***", for logs and display.
        """
        token = "***" if redact else self.access_token
        url = (
            f"{self.base_url}{dataset}/{query}.json"
            f"?access_token={token}"
            f"&country={self.country}"
        )

        if self.search_bounds:
            url += f"&bbox={format_coordinates(self.search_bounds)}"

        if self.search_center:
            center = format_coordinates(self.search_center)
            url += f"&{center}" if self.legacy_proximity else f"&proximity={center}"

        return url

    async def geocode(
        self,
        dataset: str,
        address: str,
        done: Optional[DoneCallback] = None,
    ) -> Any:
        """
        Geocode a free-text address.

        Args:
            dataset: Mapbox dataset ('mapbox.places' or 'mapbox.places-permanent')
            address: The address to geocode
            done: Optional callback receiving (error, data)

        Returns:
            Parsed JSON response, or None when `done` is given
        """
        return await self._query(dataset, address, done)

    async def reverse_geocode(
        self,
        dataset: str,
        lng: Number,
        lat: Number,
        done: Optional[DoneCallback] = None,
    ) -> Any:
        """
        Reverse geocode a longitude/latitude pair.

        Args:
            dataset: Mapbox dataset ('mapbox.places' or 'mapbox.places-permanent')
            lng: Longitude
            lat: Latitude
            done: Optional callback receiving (error, data)

        Returns:
            Parsed JSON response, or None when `done` is given
        """
        query = format_coordinates((lng, lat))
        return await self._query(dataset, query, done)

    async def _query(self, dataset: str, query: str, done: Optional[DoneCallback]) -> Any:
        try:
            data = await self._fetch(dataset, query)
        except GeocodingError as e:
            if done is None:
                raise
            done(e, None)
            return None

        if done is None:
            return data
        done(None, data)
        return None

    async def _fetch(self, dataset: str, query: str) -> Any:
        if not self.access_token:
            raise ConfigurationError("access token not set", dataset=dataset, query=query)

        if not dataset:
            raise ConfigurationError("dataset required", dataset=dataset, query=query)

        if not query:
            raise ConfigurationError("query required", dataset=dataset, query=query)

        url = self.build_url(dataset, query)
        logger.debug(f"Mapbox: GET {self.build_url(dataset, query, redact=True)}")

        try:
            response = await self.transport.get(url)
        except Exception as e:
            logger.error(f"Mapbox: Request failed for {dataset}/{query}: {e}")
            raise TransportError(e, dataset=dataset, query=query) from e

        if response.status != 200:
            try:
                payload = json.loads(response.body)
            except ValueError:
                payload = response.body
            logger.warning(f"Mapbox HTTP {response.status} for {dataset}/{query}")
            raise ProtocolError(response.status, payload, dataset=dataset, query=query)

        try:
            return json.loads(response.body)
        except ValueError as e:
            logger.warning(f"Mapbox: Unparsable response for {dataset}/{query}")
            raise DecodeError(response.body, dataset=dataset, query=query) from e
