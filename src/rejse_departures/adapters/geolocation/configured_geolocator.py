"""Geolocator reporting a position taken from configuration."""

from rejse_departures.domain.models.departure_item import Coordinates
from rejse_departures.domain.models.errors import GeolocationError
from rejse_departures.domain.ports.geolocator import Geolocator


class ConfiguredGeolocator(Geolocator):
    """Reports the configured device position."""

    def __init__(self, latitude: float | None, longitude: float | None) -> None:
        self.latitude = latitude
        self.longitude = longitude

    async def locate(self) -> Coordinates:
        """Return the configured position.

        Raises:
            GeolocationError: If no position is configured or it is out of range.
        """
        if self.latitude is None or self.longitude is None:
            raise GeolocationError("No device position configured (set LATITUDE and LONGITUDE)")
        if not -90 <= self.latitude <= 90 or not -180 <= self.longitude <= 180:
            raise GeolocationError(
                f"Configured position {self.latitude},{self.longitude} is out of range"
            )
        return Coordinates(latitude=self.latitude, longitude=self.longitude)
