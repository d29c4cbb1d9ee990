"""Adapters layer - external system integrations."""

from rejse_departures.adapters.config import AppConfig
from rejse_departures.adapters.rejseplanen_api import (
    RejseplanenAddressLookup,
    RejseplanenDepartureBoard,
    RejseplanenHttpClient,
    RejseplanenLocationSearch,
)
from rejse_departures.adapters.storage import JsonFileConfigStore

__all__ = [
    "AppConfig",
    "JsonFileConfigStore",
    "RejseplanenAddressLookup",
    "RejseplanenDepartureBoard",
    "RejseplanenHttpClient",
    "RejseplanenLocationSearch",
]
