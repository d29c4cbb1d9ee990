"""Domain models for the departure board."""

from rejse_departures.domain.models.board import (
    BoardPhase,
    BoardSnapshot,
    DepartureBoardQuery,
    RedirectSignal,
)
from rejse_departures.domain.models.departure_item import (
    Coordinates,
    DepartureItem,
    EtaSeverity,
    TransportType,
)
from rejse_departures.domain.models.error_details import ErrorDetails
from rejse_departures.domain.models.errors import (
    ConfigurationValidationError,
    GatewayError,
    GatewayTransportError,
    GeolocationError,
    MissingCredentialError,
    UpstreamError,
)
from rejse_departures.domain.models.place import Place, TransportMode, TransportModes
from rejse_departures.domain.models.stop_location import StopLocation
from rejse_departures.domain.models.stored_configuration import StoredTripConfiguration
from rejse_departures.domain.models.trip_config import TripConfig

__all__ = [
    "BoardPhase",
    "BoardSnapshot",
    "ConfigurationValidationError",
    "Coordinates",
    "DepartureBoardQuery",
    "DepartureItem",
    "ErrorDetails",
    "EtaSeverity",
    "GatewayError",
    "GatewayTransportError",
    "GeolocationError",
    "MissingCredentialError",
    "Place",
    "RedirectSignal",
    "StopLocation",
    "StoredTripConfiguration",
    "TransportMode",
    "TransportModes",
    "TransportType",
    "TripConfig",
    "UpstreamError",
]
