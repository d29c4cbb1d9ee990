"""Departure item domain model."""

from dataclasses import dataclass
from enum import Enum


class TransportType(str, Enum):
    """Normalized transport type of a departure."""

    BUS = "Bus"
    TRAIN = "Train"
    UNKNOWN = "Unknown"


class EtaSeverity(int, Enum):
    """Display severity of a countdown label, calmest last."""

    NOW = 0
    DEPARTED = 1
    UNDER_5 = 2
    UNDER_10 = 3
    UNDER_15 = 4
    UNDER_20 = 5
    UNDER_25 = 6
    UNDER_30 = 7
    CALM = 8


@dataclass(frozen=True)
class Coordinates:
    """Geographic position."""

    latitude: float
    longitude: float

    @property
    def map_url(self) -> str:
        """Link to the position on OpenStreetMap."""
        return (
            f"https://www.openstreetmap.org/?mlat={self.latitude}&mlon={self.longitude}"
            f"#map=17/{self.latitude}/{self.longitude}"
        )


@dataclass(frozen=True)
class DepartureItem:
    """One upcoming departure from the board.

    Only ``eta`` and ``severity`` change between fetches.
    """

    transport_type: TransportType | None
    destination: str
    origin: str
    scheduled_date: str  # YYYY-MM-DD
    scheduled_time: str  # HH:MM or HH:MM:SS
    line_name: str
    platform: str | None = None
    coordinates: Coordinates | None = None
    eta: str | None = None
    severity: EtaSeverity | None = None

    @property
    def identity_key(self) -> tuple[str, str, str]:
        """Key that identifies this departure across re-projections."""
        return (self.scheduled_date, self.scheduled_time, self.destination)
