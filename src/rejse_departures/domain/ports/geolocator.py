"""Geolocator port."""

from typing import Protocol

from rejse_departures.domain.models.departure_item import Coordinates


class Geolocator(Protocol):
    """Port for obtaining the device position."""

    async def locate(self) -> Coordinates:
        """Return the current position.

        Raises:
            GeolocationError: If the position is unavailable or access is denied.
        """
        ...
