"""Shared test doubles for the departure board."""

from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from rejse_departures.domain.models import BoardSnapshot, Coordinates, GeolocationError
from rejse_departures.domain.ports import BoardDisplay

COPENHAGEN = ZoneInfo("Europe/Copenhagen")


class MemoryConfigStore:
    """Dict backed config store."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class StubGeolocator:
    """Returns a fixed position, or fails when none is given."""

    def __init__(self, position: Coordinates | None = None) -> None:
        self.position = position
        self.calls = 0

    async def locate(self) -> Coordinates:
        self.calls += 1
        if self.position is None:
            raise GeolocationError("Permission denied")
        return self.position


class RecordingDisplay(BoardDisplay):
    """Keeps every rendered snapshot."""

    def __init__(self) -> None:
        self.snapshots: list[BoardSnapshot] = []

    async def render(self, snapshot: BoardSnapshot) -> None:
        self.snapshots.append(snapshot)


class MutableClock:
    """Clock whose time tests can move."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def departure_record(
    time: str,
    date: str = "2026-03-10",
    icon: Any = "prod_bus",
    direction: str = "Hovedbanegården",
    name: str = "Bus 5C",
    **extra: Any,
) -> dict[str, Any]:
    """Raw departure board record in the journey planner's shape."""
    record: dict[str, Any] = {
        "name": name,
        "type": "ST",
        "stop": "Nørreport St.",
        "time": time,
        "date": date,
        "direction": direction,
        "Product": [{"name": name, "icon": {"res": icon} if icon else {}}],
    }
    record.update(extra)
    return record


@pytest.fixture
def fixed_now() -> datetime:
    """Tuesday noon in Copenhagen."""
    return datetime(2026, 3, 10, 12, 0, 0, tzinfo=COPENHAGEN)


@pytest.fixture
def memory_store() -> MemoryConfigStore:
    """Empty in-memory config store."""
    return MemoryConfigStore()


@pytest.fixture
def recording_display() -> RecordingDisplay:
    """Display recording snapshots."""
    return RecordingDisplay()
