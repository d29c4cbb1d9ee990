"""Setup flow: stop suggestions, saving and sharing trip configurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from rejse_departures.application.services.configuration_resolver import (
    BUS,
    DEFAULT_NAMESPACE,
    DIRECTION_EXT_ID,
    DIRECTION_NAME,
    DURATION,
    LOCATION_EXT_ID,
    LOCATION_NAME,
    TRAIN,
    parse_persisted_config,
)
from rejse_departures.domain.models.error_details import ErrorDetails
from rejse_departures.domain.models.errors import ConfigurationValidationError
from rejse_departures.domain.models.place import Place
from rejse_departures.domain.models.stored_configuration import StoredTripConfiguration
from rejse_departures.domain.models.trip_config import (
    MAX_DURATION_MINUTES,
    MIN_DURATION_MINUTES,
    TripConfig,
)

if TYPE_CHECKING:
    from rejse_departures.domain.models.stop_location import StopLocation
    from rejse_departures.domain.ports import ConfigStore, LocationSearchGateway

logger = logging.getLogger(__name__)

MIN_SEARCH_LENGTH = 4


def _flag(value: bool) -> str:
    return "true" if value else "false"


class SetupService:
    """Backs the setup flow the board redirects to."""

    def __init__(
        self,
        config_store: ConfigStore,
        location_search: LocationSearchGateway,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self.config_store = config_store
        self.location_search = location_search
        self.namespace = namespace

    async def suggest_locations(self, text: str) -> list[StopLocation]:
        """Stop suggestions for partially typed text.

        Short input gives no suggestions and failed searches give none either.
        """
        if len(text) < MIN_SEARCH_LENGTH:
            return []
        try:
            return await self.location_search.search_locations(text)
        except Exception as e:
            logger.error(
                f"Error fetching suggestions for '{text}': {ErrorDetails.from_exception(e).reason}"
            )
            return []

    def load(self) -> TripConfig:
        """Persisted configuration, or a fresh default when none is usable."""
        return parse_persisted_config(self.config_store.get(self.namespace)) or TripConfig(
            origin=Place()
        )

    @staticmethod
    def validate(config: TripConfig) -> None:
        """Check a configuration entered in the setup flow.

        Raises:
            ConfigurationValidationError: If the origin is missing or the
                duration is outside the allowed range.
        """
        if not config.origin.ext_id:
            raise ConfigurationValidationError("An origin stop is required")
        if not MIN_DURATION_MINUTES <= config.duration_minutes <= MAX_DURATION_MINUTES:
            raise ConfigurationValidationError(
                f"Duration must be between {MIN_DURATION_MINUTES} and "
                f"{MAX_DURATION_MINUTES} minutes, got {config.duration_minutes}"
            )

    def save(self, config: TripConfig) -> None:
        """Validate and persist a configuration."""
        self.validate(config)
        self.config_store.set(
            self.namespace, StoredTripConfiguration.from_trip_config(config).to_json()
        )
        origin = config.origin.name or config.origin.ext_id
        logger.info(f"Configuration saved for origin '{origin}'")

    @staticmethod
    def share_params(config: TripConfig) -> dict[str, str]:
        """Shareable-link parameters reproducing a configuration."""
        params = {
            LOCATION_EXT_ID: config.origin.ext_id,
            LOCATION_NAME: config.origin.name,
            DURATION: str(config.duration_minutes),
            BUS: _flag(config.modes.bus),
            TRAIN: _flag(config.modes.train),
        }
        if config.direction.ext_id:
            params[DIRECTION_EXT_ID] = config.direction.ext_id
            params[DIRECTION_NAME] = config.direction.name
        return params

    @classmethod
    def share_link(cls, base_url: str, config: TripConfig) -> str:
        """Shareable link for a configuration."""
        separator = "&" if "?" in base_url else "?"
        return f"{base_url}{separator}{urlencode(cls.share_params(config))}"
