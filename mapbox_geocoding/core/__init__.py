"""
Core module providing shared configuration and utilities.

- Configuration management (settings, environment variables)
- Utility functions (coordinate handling)

Usage:
    from mapbox_geocoding.core import settings
    from mapbox_geocoding.core.utils import normalize_bounds
"""

from mapbox_geocoding.core.config import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
