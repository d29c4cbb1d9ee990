"""Countdown projection for departure items."""

import math
from dataclasses import replace
from datetime import datetime
from zoneinfo import ZoneInfo

from rejse_departures.domain.models.departure_item import DepartureItem, EtaSeverity

NOW_LABEL = "Nu"
DEPARTED_LABEL = "Rejste"
NOW_WINDOW_SECONDS = 30

# Upper minute bound (exclusive) -> severity; anything beyond is calm
_MINUTE_SEVERITIES: tuple[tuple[int, EtaSeverity], ...] = (
    (5, EtaSeverity.UNDER_5),
    (10, EtaSeverity.UNDER_10),
    (15, EtaSeverity.UNDER_15),
    (20, EtaSeverity.UNDER_20),
    (25, EtaSeverity.UNDER_25),
    (30, EtaSeverity.UNDER_30),
)


def eta_label(delta_seconds: float) -> str:
    """Countdown label for the seconds remaining until departure."""
    if 0 <= delta_seconds < NOW_WINDOW_SECONDS:
        return NOW_LABEL
    if delta_seconds < 0:
        return DEPARTED_LABEL
    return f"{math.floor(delta_seconds / 60)}m"


def severity_for_minutes(minutes: int) -> EtaSeverity:
    """Bucket whole minutes remaining into a severity level."""
    for bound, severity in _MINUTE_SEVERITIES:
        if minutes < bound:
            return severity
    return EtaSeverity.CALM


def severity_for_label(label: str) -> EtaSeverity | None:
    """Derive the display severity from a countdown label."""
    if label == NOW_LABEL:
        return EtaSeverity.NOW
    if label == DEPARTED_LABEL:
        return EtaSeverity.DEPARTED
    if label.endswith("m") and label[:-1].isdigit():
        return severity_for_minutes(int(label[:-1]))
    return None


class CountdownProjector:
    """Recomputes the countdown of every departure against a given instant."""

    def __init__(self, timezone: str = "Europe/Copenhagen") -> None:
        """Initialize the projector.

        Args:
            timezone: IANA zone the departure dates and times are local to.
        """
        self._zone = ZoneInfo(timezone)

    def scheduled_instant(self, item: DepartureItem) -> datetime | None:
        """Combine the item's date and time of day into an aware datetime."""
        if not item.scheduled_date or not item.scheduled_time:
            return None
        try:
            naive = datetime.fromisoformat(f"{item.scheduled_date}T{item.scheduled_time}")
        except ValueError:
            return None
        return naive.replace(tzinfo=self._zone)

    def project(self, items: list[DepartureItem], now: datetime) -> list[DepartureItem]:
        """Return a new list with ``eta`` and ``severity`` recomputed.

        Pure: the input list and its items are left untouched.
        """
        if now.tzinfo is None:
            now = now.replace(tzinfo=self._zone)

        projected = []
        for item in items:
            instant = self.scheduled_instant(item)
            if instant is None:
                projected.append(replace(item, eta=None, severity=None))
                continue
            label = eta_label((instant - now).total_seconds())
            projected.append(replace(item, eta=label, severity=severity_for_label(label)))
        return projected
