"""Resolves the effective trip configuration for a board view."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from rejse_departures.domain.models.board import RedirectSignal
from rejse_departures.domain.models.error_details import ErrorDetails
from rejse_departures.domain.models.place import Place, TransportModes
from rejse_departures.domain.models.stored_configuration import StoredTripConfiguration
from rejse_departures.domain.models.trip_config import TripConfig

if TYPE_CHECKING:
    from rejse_departures.domain.ports import AddressLookupGateway, ConfigStore, Geolocator

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "rejseplanen-config"
DEFAULT_CURRENT_LOCATION_SENTINEL = "CURRENT_LOCATION"

# Shareable-link query parameter names
LOCATION_EXT_ID = "locationExtId"
LOCATION_NAME = "locationName"
DURATION = "duration"
BUS = "bus"
TRAIN = "train"
DIRECTION_EXT_ID = "directionExtId"
DIRECTION_NAME = "directionName"


def _parse_int(value: str | None) -> int:
    try:
        return int(value) if value is not None else 0
    except ValueError:
        return 0


def config_from_url_params(params: Mapping[str, str]) -> TripConfig:
    """Build a TripConfig entirely from shareable-link parameters."""
    return TripConfig(
        origin=Place(ext_id=params.get(LOCATION_EXT_ID, ""), name=params.get(LOCATION_NAME, "")),
        direction=Place(
            ext_id=params.get(DIRECTION_EXT_ID, ""), name=params.get(DIRECTION_NAME, "")
        ),
        duration_minutes=_parse_int(params.get(DURATION)),
        modes=TransportModes(bus=params.get(BUS) == "true", train=params.get(TRAIN) == "true"),
    )


def parse_persisted_config(raw: str | None) -> TripConfig | None:
    """Parse the persisted JSON record; corrupt records count as absent."""
    if not raw:
        return None
    try:
        return StoredTripConfiguration.model_validate_json(raw).to_trip_config()
    except ValidationError as e:
        logger.warning(f"Ignoring unreadable persisted configuration: {e.error_count()} error(s)")
        return None


def first_coord_location(payload: dict[str, Any]) -> Place | None:
    """First coordinate-location candidate of an address lookup payload."""
    candidates = payload.get("stopLocationOrCoordLocation") or []
    if not isinstance(candidates, list):
        return None
    for candidate in candidates:
        if not isinstance(candidate, dict):
            continue
        location = candidate.get("CoordLocation")
        if not isinstance(location, dict):
            continue
        ext_id = str(location.get("extId") or location.get("id") or "")
        if ext_id:
            return Place(
                ext_id=ext_id, name=str(location.get("name", "")), id=str(location.get("id", ""))
            )
    return None


class ConfigurationResolver:
    """Produces a TripConfig from URL parameters or persisted configuration.

    URL parameters carrying an origin win over persisted configuration. With
    neither, or on any failure, the result is a RedirectSignal to the setup
    flow instead of a partial configuration.
    """

    def __init__(
        self,
        config_store: ConfigStore,
        geolocator: Geolocator,
        address_lookup: AddressLookupGateway,
        namespace: str = DEFAULT_NAMESPACE,
        current_location_sentinel: str = DEFAULT_CURRENT_LOCATION_SENTINEL,
    ) -> None:
        """Initialize the resolver.

        Args:
            config_store: Store holding the persisted configuration.
            geolocator: Source of the device position.
            address_lookup: Gateway turning a position into a location.
            namespace: Key of the persisted configuration record.
            current_location_sentinel: Origin id meaning "use the device position".
        """
        self.config_store = config_store
        self.geolocator = geolocator
        self.address_lookup = address_lookup
        self.namespace = namespace
        self.current_location_sentinel = current_location_sentinel

    async def resolve_from_store(
        self, url_params: Mapping[str, str] | None = None
    ) -> TripConfig | RedirectSignal:
        """Resolve using the persisted configuration read once from the store."""
        return await self.resolve(url_params or {}, self.config_store.get(self.namespace))

    async def resolve(
        self, url_params: Mapping[str, str], persisted: str | None
    ) -> TripConfig | RedirectSignal:
        """Resolve the effective configuration.

        Args:
            url_params: Shareable-link query parameters.
            persisted: Raw persisted configuration, or None.

        Returns:
            The TripConfig, or a RedirectSignal to the setup flow.
        """
        if url_params.get(LOCATION_EXT_ID):
            config = config_from_url_params(url_params)
            logger.info(f"Using configuration from link for origin '{config.origin.ext_id}'")
        else:
            stored = parse_persisted_config(persisted)
            if stored is None:
                return RedirectSignal(reason="No configuration")
            config = stored

        if config.origin.ext_id == self.current_location_sentinel:
            try:
                config = await self._with_current_location(config)
            except Exception as e:
                details = ErrorDetails.from_exception(e)
                logger.warning(f"Could not resolve current location: {details.reason}")
                return RedirectSignal(reason=details.reason)

        if not config.origin.ext_id:
            return RedirectSignal(reason="Configuration has no origin")
        return config

    async def _with_current_location(self, config: TripConfig) -> TripConfig:
        """Replace the sentinel origin with the location at the device position."""
        position = await self.geolocator.locate()
        payload = await self.address_lookup.lookup_address(position.latitude, position.longitude)
        origin = first_coord_location(payload)
        if origin is None:
            raise LookupError("Address lookup returned no coordinate location")
        logger.info(f"Current location resolved to '{origin.name}'")
        return replace(config, origin=origin)
