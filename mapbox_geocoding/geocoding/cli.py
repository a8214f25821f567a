#!/usr/bin/env python3
"""
Command-line interface for the geocoding module.

Usage:
    python -m mapbox_geocoding.geocoding.cli --address "360 Plantation St, Worcester, MA"
    python -m mapbox_geocoding.geocoding.cli --reverse -71.8023 42.2626
    python -m mapbox_geocoding.geocoding.cli --address "Main St" --bbox -71.9 42.2 -71.7 42.35
    python -m mapbox_geocoding.geocoding.cli --address "Main St" --show-url
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional

from mapbox_geocoding.core import settings
from mapbox_geocoding.core.utils.geo import format_coordinates
from mapbox_geocoding.geocoding.base import GeocodingError, ProtocolError, describe_error
from mapbox_geocoding.geocoding.client import DATASET_PLACES, DATASET_PLACES_PERMANENT
from mapbox_geocoding.geocoding.facade import get_geocoder

logger = logging.getLogger(__name__)


def print_features(data: Any, verbose: bool = False) -> None:
    """Print a short summary of each returned feature."""
    features = data.get("features", []) if isinstance(data, dict) else []

    if not features:
        print("✗ No match found")
        return

    print(f"✓ {len(features)} result(s)")
    for feature in features:
        center = feature.get("center") or [None, None]
        print(f"  {feature.get('place_name', '')}")
        print(f"    Lng/Lat:   {center[0]}, {center[1]}")
        print(f"    Type:      {', '.join(feature.get('place_type', []))}")
        if "relevance" in feature:
            print(f"    Relevance: {feature['relevance']:.2f}")

    if verbose:
        print(json.dumps(data, indent=2))


async def run_query(args: argparse.Namespace) -> int:
    geocoder = get_geocoder(access_token=args.token)

    if args.center:
        geocoder.set_search_center(args.center)
    if args.bbox:
        geocoder.set_search_bounds(args.bbox)
    if args.legacy_proximity:
        geocoder.legacy_proximity = True

    label = format_coordinates(args.reverse) if args.reverse else args.address

    print(f"\nGeocoding: {label}")
    print(f"Dataset: {args.dataset}")
    print("-" * 50)

    if args.show_url and geocoder.access_token:
        print(f"URL: {geocoder.build_url(args.dataset, label, redact=True)}")

    try:
        if args.reverse:
            data = await geocoder.reverse_geocode(args.dataset, *args.reverse)
        else:
            data = await geocoder.geocode(args.dataset, args.address)
    except GeocodingError as e:
        print(f"✗ Error: {describe_error(e)}")
        if isinstance(e, ProtocolError) and args.verbose:
            print(f"  Payload: {e.payload}")
        return 1
    finally:
        await geocoder.transport.close()

    print_features(data, verbose=args.verbose)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mapbox geocoding CLI"
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--address", "-a",
        type=str,
        help="Geocode a free-text address"
    )
    target.add_argument(
        "--reverse", "-r",
        type=float,
        nargs=2,
        metavar=("LNG", "LAT"),
        help="Reverse geocode a longitude/latitude pair"
    )
    parser.add_argument(
        "--dataset", "-d",
        type=str,
        default=settings.MAPBOX_DATASET,
        help=f"Dataset to query ({DATASET_PLACES} or {DATASET_PLACES_PERMANENT})"
    )
    parser.add_argument(
        "--token", "-t",
        type=str,
        help="Mapbox access token (defaults to MAPBOX_ACCESS_TOKEN)"
    )
    parser.add_argument(
        "--center",
        type=float,
        nargs=2,
        metavar=("LNG", "LAT"),
        help="Bias results toward this point"
    )
    parser.add_argument(
        "--bbox",
        type=float,
        nargs=4,
        metavar=("MIN_LNG", "MIN_LAT", "MAX_LNG", "MAX_LAT"),
        help="Restrict results to this bounding box"
    )
    parser.add_argument(
        "--legacy-proximity",
        action="store_true",
        help="Send the center without the proximity= parameter name"
    )
    parser.add_argument(
        "--show-url",
        action="store_true",
        help="Print the request URL before sending it"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not args.address and not args.reverse:
        parser.print_help()
        return 2

    return asyncio.run(run_query(args))


if __name__ == "__main__":
    sys.exit(main())
