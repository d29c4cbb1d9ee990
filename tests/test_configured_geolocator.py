"""Tests for the configured device position."""

import pytest

from rejse_departures.adapters.geolocation import ConfiguredGeolocator
from rejse_departures.domain.models import Coordinates, GeolocationError


@pytest.mark.asyncio
async def test_when_position_configured_then_it_is_reported() -> None:
    """Given a latitude and longitude, when locating, then they are returned."""
    position = await ConfiguredGeolocator(55.6761, 12.5683).locate()

    assert position == Coordinates(latitude=55.6761, longitude=12.5683)


@pytest.mark.asyncio
@pytest.mark.parametrize(("latitude", "longitude"), [(None, 12.5), (55.6, None), (91.0, 12.5)])
async def test_when_position_missing_or_invalid_then_geolocation_error(
    latitude: float | None, longitude: float | None
) -> None:
    """Given no usable position, when locating, then GeolocationError."""
    with pytest.raises(GeolocationError):
        await ConfiguredGeolocator(latitude, longitude).locate()
