"""Rejseplanen API adapters."""

from rejse_departures.adapters.rejseplanen_api.gateways import (
    RejseplanenAddressLookup,
    RejseplanenDepartureBoard,
    RejseplanenLocationSearch,
)
from rejse_departures.adapters.rejseplanen_api.http_client import RejseplanenHttpClient

__all__ = [
    "RejseplanenAddressLookup",
    "RejseplanenDepartureBoard",
    "RejseplanenHttpClient",
    "RejseplanenLocationSearch",
]
