"""Journey planner gateway ports."""

from typing import Any, Protocol

from rejse_departures.domain.models.stop_location import StopLocation


class LocationSearchGateway(Protocol):
    """Port for searching stops by free text."""

    async def search_locations(self, text: str, **overrides: Any) -> list[StopLocation]:
        """Return stop candidates matching the text."""
        ...


class AddressLookupGateway(Protocol):
    """Port for reverse-looking up coordinates."""

    async def lookup_address(
        self, latitude: float | str, longitude: float | str, **overrides: Any
    ) -> dict[str, Any]:
        """Return the raw coordinate-location payload for a position."""
        ...


class DepartureBoardGateway(Protocol):
    """Port for fetching the raw departure board of a stop."""

    async def get_departure_board(self, params: dict[str, Any]) -> dict[str, Any]:
        """Return the raw departure board payload."""
        ...
