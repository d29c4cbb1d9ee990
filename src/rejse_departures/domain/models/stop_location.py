"""Stop location domain model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StopLocation:
    """A stop candidate returned by the location search."""

    id: str
    ext_id: str
    is_main_mast: bool | None
    name: str
    lon: float | None
    lat: float | None
    weight: int | None
    products: int | None

    def to_dict(self) -> dict[str, Any]:
        """Wire shape used by the location search endpoint."""
        return {
            "id": self.id,
            "extId": self.ext_id,
            "isMainMast": self.is_main_mast,
            "name": self.name,
            "lon": self.lon,
            "lat": self.lat,
            "weight": self.weight,
            "products": self.products,
        }
