"""Tests for environment driven settings."""

import pytest

from mapbox_geocoding.core.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in (
        "MAPBOX_ACCESS_TOKEN",
        "MAPBOX_BASE_URL",
        "MAPBOX_DATASET",
        "MAPBOX_COUNTRY",
        "MAPBOX_SEARCH_CENTER",
        "MAPBOX_SEARCH_BOUNDS",
        "MAPBOX_LEGACY_PROXIMITY",
        "HTTP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.MAPBOX_BASE_URL == "https://api.mapbox.com/geocoding/v5/"
    assert settings.MAPBOX_DATASET == "mapbox.places"
    assert settings.MAPBOX_COUNTRY == "US"
    assert settings.HTTP_TIMEOUT == 10.0
    assert settings.MAPBOX_LEGACY_PROXIMITY is False
    assert settings.search_center is None
    assert settings.search_bounds is None
    assert settings.validate_mapbox() is False


def test_values_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("MAPBOX_ACCESS_TOKEN", "pk.env")
    monkeypatch.setenv("MAPBOX_SEARCH_CENTER", "-71.8,42.26")
    monkeypatch.setenv("MAPBOX_SEARCH_BOUNDS", "-71.9,42.2,-71.7,42.35")
    monkeypatch.setenv("MAPBOX_LEGACY_PROXIMITY", "TRUE")
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")

    settings = Settings()

    assert settings.validate_mapbox() is True
    assert settings.search_center == (-71.8, 42.26)
    assert settings.search_bounds == (-71.9, 42.2, -71.7, 42.35)
    assert settings.MAPBOX_LEGACY_PROXIMITY is True
    assert settings.HTTP_TIMEOUT == 2.5


def test_malformed_bounds(monkeypatch) -> None:
    monkeypatch.setenv("MAPBOX_SEARCH_BOUNDS", "1,2")

    with pytest.raises(ValueError):
        Settings().search_bounds
