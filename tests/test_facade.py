"""Tests for the settings-driven facade and the command-line entry point."""

import pytest

from mapbox_geocoding.geocoding import cli, facade
from mapbox_geocoding.geocoding.transports import AiohttpTransport

from tests.conftest import FakeTransport


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(facade.settings, "MAPBOX_ACCESS_TOKEN", "pk.settings")
    monkeypatch.setattr(facade.settings, "MAPBOX_SEARCH_CENTER", "-71.8,42.26")
    monkeypatch.setattr(facade.settings, "MAPBOX_SEARCH_BOUNDS", "")
    monkeypatch.setattr(facade.settings, "MAPBOX_LEGACY_PROXIMITY", False)
    monkeypatch.setattr(facade.settings, "MAPBOX_DATASET", "mapbox.places")
    return facade.settings


def test_get_geocoder_from_settings(configured) -> None:
    geocoder = facade.get_geocoder()

    assert geocoder.access_token == "pk.settings"
    assert geocoder.search_center == (-71.8, 42.26)
    assert geocoder.search_bounds is None
    assert isinstance(geocoder.transport, AiohttpTransport)


def test_get_geocoder_token_override(configured) -> None:
    geocoder = facade.get_geocoder(access_token="pk.arg", transport=FakeTransport())

    assert geocoder.access_token == "pk.arg"


@pytest.mark.asyncio
async def test_geocode_address_uses_default_dataset(configured) -> None:
    transport = FakeTransport(body={"features": [{"id": "address.1"}]})
    geocoder = facade.get_geocoder(transport=transport)

    data = await facade.geocode_address("360 Plantation St", geocoder=geocoder)

    assert data["features"][0]["id"] == "address.1"
    assert "/mapbox.places/360 Plantation St.json?access_token=pk.settings&" in transport.urls[0]
    assert transport.urls[0].endswith("&proximity=-71.8,42.26")


@pytest.mark.asyncio
async def test_reverse_geocode_point_with_dataset(configured) -> None:
    transport = FakeTransport()
    geocoder = facade.get_geocoder(transport=transport)

    await facade.reverse_geocode_point(-122.4, 37.8, dataset="mapbox.places-permanent", geocoder=geocoder)

    assert "/mapbox.places-permanent/-122.4,37.8.json?" in transport.urls[0]


class TestCli:
    @pytest.fixture
    def transport(self, monkeypatch, configured):
        transport = FakeTransport(body={
            "features": [{
                "place_name": "360 Plantation St, Worcester, Massachusetts 01605, United States",
                "center": [-71.76, 42.28],
                "place_type": ["address"],
                "relevance": 1,
            }]
        })
        original = facade.get_geocoder
        monkeypatch.setattr(
            cli, "get_geocoder",
            lambda access_token=None: original(access_token=access_token, transport=transport),
        )
        return transport

    def test_forward(self, transport, capsys) -> None:
        code = cli.main(["--address", "360 Plantation St", "--show-url"])

        out = capsys.readouterr().out
        assert code == 0
        assert "1 result(s)" in out
        assert "Lng/Lat:   -71.76, 42.28" in out
        assert "URL: https://api.mapbox.com/geocoding/v5/mapbox.places/360 Plantation St.json?access_token=***&country=US" in out
        assert "pk.settings" not in out
        assert transport.closed

    def test_reverse_with_bbox_and_legacy_center(self, transport) -> None:
        code = cli.main([
            "--reverse", "-122.4", "37.8",
            "--bbox", "-10", "-10", "10", "10",
            "--center", "1", "2",
            "--legacy-proximity",
        ])

        assert code == 0
        assert "/-122.4,37.8.json?" in transport.urls[0]
        assert transport.urls[0].endswith("&bbox=-10,-10,10,10&1,2")

    def test_error_exit_code(self, monkeypatch, capsys) -> None:
        transport = FakeTransport(status=401, body={"message": "Not Authorized - Invalid Token"})
        monkeypatch.setattr(
            cli, "get_geocoder",
            lambda access_token=None: facade.MapboxGeocoder("bad", transport=transport),
        )

        code = cli.main(["--address", "x"])

        assert code == 1
        assert "HTTP 401: Not Authorized - Invalid Token" in capsys.readouterr().out

    def test_no_target_prints_help(self, capsys) -> None:
        assert cli.main([]) == 2
        assert "usage:" in capsys.readouterr().out
