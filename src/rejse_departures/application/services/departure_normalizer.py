"""Normalizer for raw departure board responses."""

import logging
from typing import Any

from rejse_departures.domain.models.departure_item import (
    Coordinates,
    DepartureItem,
    TransportType,
)

logger = logging.getLogger(__name__)

# Product icon code -> transport type
ICON_TRANSPORT_TYPES: dict[str, TransportType] = {
    "prod_bus": TransportType.BUS,
    "prod_exb": TransportType.BUS,
    "prod_nb": TransportType.BUS,
    "prod_tb": TransportType.BUS,
    "prod_train": TransportType.TRAIN,
    "prod_ic": TransportType.TRAIN,
    "prod_icl": TransportType.TRAIN,
    "prod_lyn": TransportType.TRAIN,
    "prod_reg": TransportType.TRAIN,
    "prod_re": TransportType.TRAIN,
    "prod_s": TransportType.TRAIN,
    "prod_comm_t": TransportType.TRAIN,
}


class DepartureNormalizer:
    """Maps raw departure records into DepartureItem objects."""

    @staticmethod
    def normalize(response: dict[str, Any]) -> list[DepartureItem]:
        """Normalize a departure board response.

        A response without a ``Departure`` collection means no upcoming
        departures and yields an empty list.
        """
        records = response.get("Departure")
        if not records:
            return []
        if isinstance(records, dict):
            records = [records]
        if not isinstance(records, list):
            logger.warning(f"Ignoring Departure collection of type {type(records).__name__}")
            return []

        items = []
        for record in records:
            item = DepartureNormalizer._normalize_record(record)
            if item:
                items.append(item)
        return items

    @staticmethod
    def _normalize_record(record: Any) -> DepartureItem | None:
        """Normalize one record; malformed records are skipped."""
        if not isinstance(record, dict):
            logger.warning(f"Skipping departure record of type {type(record).__name__}")
            return None

        try:
            return DepartureItem(
                transport_type=DepartureNormalizer.transport_type_for(record.get("Product")),
                destination=str(record.get("direction") or ""),
                origin=str(record.get("stop") or ""),
                scheduled_date=str(record.get("date") or ""),
                scheduled_time=str(record.get("time") or ""),
                line_name=str(record.get("name") or ""),
                platform=DepartureNormalizer._platform(record),
                coordinates=DepartureNormalizer._coordinates(record),
            )
        except Exception as e:
            logger.warning(f"Error normalizing departure: {e}")
            return None

    @staticmethod
    def transport_type_for(products: Any) -> TransportType | None:
        """Map the first product's icon code to a transport type.

        Returns None when the record carries no product at all and
        ``TransportType.UNKNOWN`` for unrecognized codes.
        """
        if isinstance(products, dict):
            products = [products]
        if not isinstance(products, list) or not products:
            return None

        first = products[0]
        icon = first.get("icon") if isinstance(first, dict) else None
        if isinstance(icon, dict):
            icon = icon.get("res")
        if not icon:
            return None
        return ICON_TRANSPORT_TYPES.get(str(icon).lower(), TransportType.UNKNOWN)

    @staticmethod
    def _platform(record: dict[str, Any]) -> str | None:
        """Realtime track if known, otherwise the scheduled track."""
        track = record.get("rtTrack") or record.get("track")
        return str(track) if track else None

    @staticmethod
    def _coordinates(record: dict[str, Any]) -> Coordinates | None:
        lat = record.get("lat")
        lon = record.get("lon")
        if lat is None or lon is None:
            return None
        try:
            return Coordinates(latitude=float(lat), longitude=float(lon))
        except (TypeError, ValueError):
            return None
