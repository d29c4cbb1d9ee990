"""Ports (interfaces) for the ports-and-adapters architecture."""

from rejse_departures.domain.ports.board_display import BoardDisplay
from rejse_departures.domain.ports.config_store import ConfigStore
from rejse_departures.domain.ports.gateways import (
    AddressLookupGateway,
    DepartureBoardGateway,
    LocationSearchGateway,
)
from rejse_departures.domain.ports.geolocator import Geolocator

__all__ = [
    "AddressLookupGateway",
    "BoardDisplay",
    "ConfigStore",
    "DepartureBoardGateway",
    "Geolocator",
    "LocationSearchGateway",
]
