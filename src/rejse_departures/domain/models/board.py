"""Departure board state models."""

from dataclasses import dataclass, field
from enum import Enum

from rejse_departures.domain.models.departure_item import DepartureItem
from rejse_departures.domain.models.trip_config import TripConfig

SETUP_TARGET = "/configure"


class BoardPhase(str, Enum):
    """Lifecycle phase of a departure board view."""

    IDLE = "idle"
    RESOLVING = "resolving"
    FETCHING = "fetching"
    READY = "ready"
    REDIRECTED = "redirected"


@dataclass(frozen=True)
class RedirectSignal:
    """Instruction to send the user to the setup flow.

    Not an error: it is also the normal first-run outcome.
    """

    reason: str
    target: str = SETUP_TARGET


@dataclass(frozen=True)
class DepartureBoardQuery:
    """Parameters of one departure board request."""

    stop_ext_id: str
    duration_minutes: int
    products: int
    direction_ext_id: str | None = None
    date: str | None = None
    time: str | None = None

    def to_params(self) -> dict[str, str | int]:
        """Query parameters for the departure board call."""
        params: dict[str, str | int] = {
            "id": self.stop_ext_id,
            "duration": self.duration_minutes,
            "products": self.products,
        }
        if self.direction_ext_id:
            params["direction"] = self.direction_ext_id
        if self.date:
            params["date"] = self.date
        if self.time:
            params["time"] = self.time
        return params


@dataclass(frozen=True)
class BoardSnapshot:
    """What a display renders after each fetch or countdown tick."""

    phase: BoardPhase
    items: list[DepartureItem] = field(default_factory=list)
    config: TripConfig | None = None
    redirect: RedirectSignal | None = None

    @property
    def has_no_departures(self) -> bool:
        """Ready with an empty list: distinct from a failure."""
        return self.phase == BoardPhase.READY and not self.items
