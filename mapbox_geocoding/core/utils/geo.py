"""
Coordinate helpers shared by the client, the settings loader and the CLI.

This module covers the small amount of geographic handling the client needs:
- Normalising a center point or bounding box supplied by a caller
- Rendering numbers the way the Mapbox URL expects them
- Parsing "lng,lat" style strings from the environment

Usage:
    from mapbox_geocoding.core.utils.geo import format_coordinates, normalize_bounds

    bbox = normalize_bounds([-10, -10, 10, 10])
    format_coordinates(bbox)  # "-10,-10,10,10"
"""

import math
from decimal import Decimal
from numbers import Real
from typing import Tuple, Optional, Sequence, Union

Number = Union[int, float]
Center = Tuple[Number, Number]
Bounds = Tuple[Number, Number, Number, Number]


def _normalize(values: Sequence, size: int, label: str) -> tuple:
    if isinstance(values, (str, bytes)):
        raise ValueError(f"{label} must be a sequence of {size} numbers, got {values!r}")

    try:
        items = tuple(values)
    except TypeError:
        raise ValueError(f"{label} must be a sequence of {size} numbers, got {values!r}")

    if len(items) != size:
        raise ValueError(f"{label} must have exactly {size} values, got {len(items)}")

    for item in items:
        if isinstance(item, bool) or not isinstance(item, Real) or not math.isfinite(item):
            raise ValueError(f"{label} values must be finite numbers, got {item!r}")

    return items


def normalize_center(center: Optional[Sequence]) -> Optional[Center]:
    """
    Validate a (longitude, latitude) pair.

    Args:
        center: Two numbers, or None to clear

    Returns:
        The pair as a tuple, or None

    Raises:
        ValueError: If the value is not two finite numbers
    """
    if center is None:
        return None
    return _normalize(center, 2, "search center")


def normalize_bounds(bbox: Optional[Sequence]) -> Optional[Bounds]:
    """
    Validate a (min_lng, min_lat, max_lng, max_lat) bounding box.

    Ordering of min/max is not checked; the API reports inverted boxes itself.

    Args:
        bbox: Four numbers, or None to clear

    Returns:
        The box as a tuple, or None

    Raises:
        ValueError: If the value is not four finite numbers
    """
    if bbox is None:
        return None
    return _normalize(bbox, 4, "search bounds")


def format_number(value: Number) -> str:
    """
    Render a number the way it appears in a Mapbox URL.

    Follows JavaScript number-to-string rules: integral floats drop their
    fractional part, exponent notation is used only below 1e-6 or from 1e21
    up, and exponents carry no leading zero.

    Example:
        >>> format_number(-122.4)
        '-122.4'
        >>> format_number(10.0)
        '10'
        >>> format_number(0.00001)
        '0.00001'
        >>> format_number(1.5e-7)
        '1.5e-7'
    """
    if not isinstance(value, float):
        return str(value)

    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    exponent = int(exponent)
    if -7 < exponent < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def format_coordinates(values: Sequence[Number]) -> str:
    """Join numbers with commas, e.g. a center or bounding box."""
    return ",".join(format_number(v) for v in values)


def parse_coordinate_list(raw: str, size: int) -> tuple:
    """
    Parse a comma separated list of numbers such as "-71.8,42.26".

    Raises:
        ValueError: If the string does not hold exactly `size` numbers
    """
    parts = [p.strip() for p in raw.split(",")]
    try:
        numbers = [float(p) for p in parts]
    except ValueError:
        raise ValueError(f"Cannot parse coordinates from {raw!r}")
    return _normalize(numbers, size, "coordinates")
