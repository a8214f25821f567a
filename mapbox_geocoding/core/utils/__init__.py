"""
Shared utility functions for the Mapbox geocoding client.

Modules:
- geo: Center / bounding box validation and URL number formatting

Usage:
    from mapbox_geocoding.core.utils import normalize_bounds, format_coordinates
"""

from mapbox_geocoding.core.utils.geo import (
    normalize_center,
    normalize_bounds,
    format_number,
    format_coordinates,
    parse_coordinate_list,
)

__all__ = [
    "normalize_center",
    "normalize_bounds",
    "format_number",
    "format_coordinates",
    "parse_coordinate_list",
]
