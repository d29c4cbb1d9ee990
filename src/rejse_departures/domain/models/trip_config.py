"""Trip configuration domain model."""

from dataclasses import dataclass, field

from rejse_departures.domain.models.place import Place, TransportModes

DEFAULT_DURATION_MINUTES = 15
MIN_DURATION_MINUTES = 5
MAX_DURATION_MINUTES = 30


@dataclass(frozen=True)
class TripConfig:
    """The resolved trip preference a departure board is built from.

    Instances are never mutated; a configuration change produces a new one.
    """

    origin: Place
    direction: Place = field(default_factory=Place)  # Empty means no direction filter
    duration_minutes: int = DEFAULT_DURATION_MINUTES
    modes: TransportModes = field(default_factory=TransportModes)
