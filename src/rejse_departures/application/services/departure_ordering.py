"""Deterministic ordering of departure items."""

from functools import cmp_to_key

from rejse_departures.domain.models.departure_item import DepartureItem


def _compare_text(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _scheduled_key(item: DepartureItem) -> str:
    """Chronological sort text: ISO date plus zero-padded time."""
    return f"{item.scheduled_date}T{item.scheduled_time}"


def compare_departures(a: DepartureItem, b: DepartureItem) -> int:
    """Compare by transport type, then by scheduled date and time.

    An unset transport type on either side ties on the first key.
    """
    if a.transport_type is not None and b.transport_type is not None:
        by_type = _compare_text(a.transport_type.value, b.transport_type.value)
        if by_type:
            return by_type

    if not a.scheduled_time or not b.scheduled_time:
        return 0
    if a.scheduled_date and b.scheduled_date:
        return _compare_text(_scheduled_key(a), _scheduled_key(b))
    return _compare_text(a.scheduled_time, b.scheduled_time)


def order_departures(items: list[DepartureItem]) -> list[DepartureItem]:
    """Return a new, stably sorted list of departures."""
    return sorted(items, key=cmp_to_key(compare_departures))
