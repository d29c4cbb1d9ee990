"""Application services."""

from rejse_departures.application.services.configuration_resolver import ConfigurationResolver
from rejse_departures.application.services.countdown_projector import CountdownProjector
from rejse_departures.application.services.departure_board_orchestrator import (
    DepartureBoardOrchestrator,
)
from rejse_departures.application.services.departure_normalizer import DepartureNormalizer
from rejse_departures.application.services.departure_ordering import order_departures
from rejse_departures.application.services.product_bitmask import product_bitmask
from rejse_departures.application.services.setup_service import SetupService

__all__ = [
    "ConfigurationResolver",
    "CountdownProjector",
    "DepartureBoardOrchestrator",
    "DepartureNormalizer",
    "SetupService",
    "order_departures",
    "product_bitmask",
]
