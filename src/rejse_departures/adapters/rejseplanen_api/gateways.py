"""Rejseplanen gateway adapters for location search, address lookup and departure board."""

import logging
from typing import Any

from rejse_departures.adapters.rejseplanen_api.constants import (
    ADDRESS_LOOKUP_DEFAULTS,
    ADDRESS_LOOKUP_PATH,
    DEPARTURE_BOARD_DEFAULTS,
    DEPARTURE_BOARD_PATH,
    LOCATION_SEARCH_DEFAULTS,
    LOCATION_SEARCH_PATH,
)
from rejse_departures.adapters.rejseplanen_api.http_client import RejseplanenHttpClient
from rejse_departures.domain.models.errors import UpstreamError
from rejse_departures.domain.models.stop_location import StopLocation
from rejse_departures.domain.ports.gateways import (
    AddressLookupGateway,
    DepartureBoardGateway,
    LocationSearchGateway,
)

logger = logging.getLogger(__name__)


def _as_float(value: Any) -> float | None:
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _as_int(value: Any) -> int | None:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _as_bool(value: Any) -> bool | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.lower() == "true"
    return bool(value)


def _require_dict(data: Any, endpoint: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise UpstreamError(f"Unexpected {endpoint} payload of type {type(data).__name__}")
    return data


class RejseplanenLocationSearch(LocationSearchGateway):
    """Location search adapter keeping only stop candidates."""

    def __init__(self, http_client: RejseplanenHttpClient) -> None:
        self._http_client = http_client

    @staticmethod
    def parse_stop_locations(payload: dict[str, Any]) -> list[StopLocation]:
        """Project the stop candidates of a location search response.

        Coordinate and POI candidates are dropped.
        """
        candidates = payload.get("stopLocationOrCoordLocation") or []
        if not isinstance(candidates, list):
            raise UpstreamError("stopLocationOrCoordLocation is not a list")

        stops = []
        for candidate in candidates:
            if not isinstance(candidate, dict):
                continue
            stop = candidate.get("StopLocation")
            if not isinstance(stop, dict):
                continue
            stops.append(
                StopLocation(
                    id=str(stop.get("id", "")),
                    ext_id=str(stop.get("extId", "")),
                    is_main_mast=_as_bool(stop.get("isMainMast")),
                    name=str(stop.get("name", "")),
                    lon=_as_float(stop.get("lon")),
                    lat=_as_float(stop.get("lat")),
                    weight=_as_int(stop.get("weight")),
                    products=_as_int(stop.get("products")),
                )
            )
        return stops

    async def search_locations(self, text: str, **overrides: Any) -> list[StopLocation]:
        """Search stops by name.

        Raises:
            ValueError: If the search text is empty.
        """
        if not text:
            raise ValueError("Input parameter is required")

        data = await self._http_client.get_json(
            LOCATION_SEARCH_PATH, LOCATION_SEARCH_DEFAULTS, {**overrides, "input": text}
        )
        stops = self.parse_stop_locations(_require_dict(data, "location search"))
        logger.debug(f"Location search for '{text}' returned {len(stops)} stop(s)")
        return stops


class RejseplanenAddressLookup(AddressLookupGateway):
    """Reverse lookup of a coordinate into nearby addresses."""

    def __init__(self, http_client: RejseplanenHttpClient) -> None:
        self._http_client = http_client

    async def lookup_address(
        self, latitude: float | str, longitude: float | str, **overrides: Any
    ) -> dict[str, Any]:
        """Return the raw coordinate-location payload for a position."""
        params = {**overrides, "originCoordLat": latitude, "originCoordLong": longitude}
        data = await self._http_client.get_json(
            ADDRESS_LOOKUP_PATH, ADDRESS_LOOKUP_DEFAULTS, params
        )
        return _require_dict(data, "address lookup")


class RejseplanenDepartureBoard(DepartureBoardGateway):
    """Departure board adapter."""

    def __init__(self, http_client: RejseplanenHttpClient) -> None:
        self._http_client = http_client

    async def get_departure_board(self, params: dict[str, Any]) -> dict[str, Any]:
        """Return the raw departure board payload for a stop."""
        data = await self._http_client.get_json(
            DEPARTURE_BOARD_PATH, DEPARTURE_BOARD_DEFAULTS, params
        )
        return _require_dict(data, "departure board")
