"""
Centralized configuration management for the Mapbox geocoding client.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from mapbox_geocoding.core.config import settings

    # Access configuration
    print(settings.MAPBOX_ACCESS_TOKEN)
    print(settings.HTTP_TIMEOUT)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Tuple
from dotenv import load_dotenv

from mapbox_geocoding.core.utils.geo import parse_coordinate_list

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path(__file__).parent.parent.parent / ".env",  # project root
    Path.cwd() / ".env",  # Current working directory
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # Mapbox API
    # ==========================================================================
    MAPBOX_ACCESS_TOKEN: str = field(
        default_factory=lambda: os.getenv("MAPBOX_ACCESS_TOKEN", "")
    )
    MAPBOX_BASE_URL: str = field(
        default_factory=lambda: os.getenv(
            "MAPBOX_BASE_URL",
            "https://api.mapbox.com/geocoding/v5/"
        )
    )
    MAPBOX_DATASET: str = field(
        default_factory=lambda: os.getenv("MAPBOX_DATASET", "mapbox.places")
    )
    MAPBOX_COUNTRY: str = field(
        default_factory=lambda: os.getenv("MAPBOX_COUNTRY", "US")
    )

    # ==========================================================================
    # Search biasing ("lng,lat" and "minLng,minLat,maxLng,maxLat")
    # ==========================================================================
    MAPBOX_SEARCH_CENTER: str = field(
        default_factory=lambda: os.getenv("MAPBOX_SEARCH_CENTER", "")
    )
    MAPBOX_SEARCH_BOUNDS: str = field(
        default_factory=lambda: os.getenv("MAPBOX_SEARCH_BOUNDS", "")
    )
    MAPBOX_LEGACY_PROXIMITY: bool = field(
        default_factory=lambda: os.getenv("MAPBOX_LEGACY_PROXIMITY", "false").lower() == "true"
    )

    # ==========================================================================
    # HTTP
    # ==========================================================================
    HTTP_TIMEOUT: float = field(
        default_factory=lambda: float(os.getenv("HTTP_TIMEOUT", "10"))
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    LOG_LEVEL: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper()
    )

    @property
    def search_center(self) -> Optional[Tuple[float, float]]:
        if not self.MAPBOX_SEARCH_CENTER:
            return None
        return parse_coordinate_list(self.MAPBOX_SEARCH_CENTER, 2)

    @property
    def search_bounds(self) -> Optional[Tuple[float, float, float, float]]:
        if not self.MAPBOX_SEARCH_BOUNDS:
            return None
        return parse_coordinate_list(self.MAPBOX_SEARCH_BOUNDS, 4)

    def validate_mapbox(self) -> bool:
        """Check if a Mapbox access token is configured."""
        return bool(self.MAPBOX_ACCESS_TOKEN)


# Singleton settings instance
settings = Settings()
