"""Persisted (JSON) shape of a trip configuration."""

from pydantic import BaseModel, ConfigDict, Field

from rejse_departures.domain.models.place import Place, TransportModes
from rejse_departures.domain.models.trip_config import DEFAULT_DURATION_MINUTES, TripConfig


class StoredPlace(BaseModel):
    """A place as written to the configuration store."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    name: str = ""
    ext_id: str = Field(default="", alias="extId")


class StoredProducts(BaseModel):
    """Mode flags as written to the configuration store."""

    bus: bool = False
    train: bool = False


class StoredTripConfiguration(BaseModel):
    """JSON record kept under the configuration namespace key."""

    location: StoredPlace
    duration: int = DEFAULT_DURATION_MINUTES
    products: StoredProducts = Field(default_factory=StoredProducts)
    direction: StoredPlace = Field(default_factory=StoredPlace)

    def to_trip_config(self) -> TripConfig:
        """Convert the stored record into a TripConfig."""
        return TripConfig(
            origin=Place(
                ext_id=self.location.ext_id, name=self.location.name, id=self.location.id
            ),
            direction=Place(
                ext_id=self.direction.ext_id, name=self.direction.name, id=self.direction.id
            ),
            duration_minutes=self.duration,
            modes=TransportModes(bus=self.products.bus, train=self.products.train),
        )

    @classmethod
    def from_trip_config(cls, config: TripConfig) -> "StoredTripConfiguration":
        """Build the stored record for a TripConfig."""
        return cls(
            location=StoredPlace(
                id=config.origin.id, name=config.origin.name, ext_id=config.origin.ext_id
            ),
            duration=config.duration_minutes,
            products=StoredProducts(bus=config.modes.bus, train=config.modes.train),
            direction=StoredPlace(
                id=config.direction.id,
                name=config.direction.name,
                ext_id=config.direction.ext_id,
            ),
        )

    def to_json(self) -> str:
        """Serialize using the upstream-style camelCase keys."""
        return self.model_dump_json(by_alias=True)
