"""Domain layer - core business logic and models."""

from rejse_departures.domain.models import (
    DepartureItem,
    Place,
    TransportModes,
    TripConfig,
)
from rejse_departures.domain.ports import (
    BoardDisplay,
    ConfigStore,
    DepartureBoardGateway,
    Geolocator,
)

__all__ = [
    "BoardDisplay",
    "ConfigStore",
    "DepartureBoardGateway",
    "DepartureItem",
    "Geolocator",
    "Place",
    "TransportModes",
    "TripConfig",
]
