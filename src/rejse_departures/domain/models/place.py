"""Place and transport mode domain models."""

from dataclasses import dataclass
from enum import Enum


class TransportMode(str, Enum):
    """Transport modes a user can filter the departure board by."""

    BUS = "bus"
    TRAIN = "train"


@dataclass(frozen=True)
class Place:
    """A stop or location as known by the journey planner."""

    ext_id: str = ""
    name: str = ""
    id: str = ""  # Provider-internal id, kept only for round-tripping stored config

    @property
    def is_empty(self) -> bool:
        """Whether no external id is set."""
        return not self.ext_id


@dataclass(frozen=True)
class TransportModes:
    """Bus/train filter flags. Both false is valid."""

    bus: bool = False
    train: bool = False

    def enabled(self) -> list[TransportMode]:
        """Return the enabled modes in a fixed order."""
        modes = []
        if self.bus:
            modes.append(TransportMode.BUS)
        if self.train:
            modes.append(TransportMode.TRAIN)
        return modes
