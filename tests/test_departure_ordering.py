"""Tests for departure ordering."""

from rejse_departures.application.services.departure_ordering import (
    compare_departures,
    order_departures,
)
from rejse_departures.domain.models import DepartureItem, TransportType


def _item(
    transport_type: TransportType | None,
    time: str,
    destination: str = "Ballerup",
    date: str = "2026-03-10",
) -> DepartureItem:
    return DepartureItem(
        transport_type=transport_type,
        destination=destination,
        origin="Nørreport St.",
        scheduled_date=date,
        scheduled_time=time,
        line_name="X",
    )


def test_when_types_differ_then_type_dominates_time() -> None:
    """Given a later bus and an earlier train, when ordering, then the bus comes first."""
    train = _item(TransportType.TRAIN, "12:01")
    bus = _item(TransportType.BUS, "12:45")

    assert order_departures([train, bus]) == [bus, train]


def test_when_types_equal_then_sorted_by_time() -> None:
    """Given departures of one type, when ordering, then sorted by scheduled time."""
    late = _item(TransportType.BUS, "12:30")
    early = _item(TransportType.BUS, "12:05")
    middle = _item(TransportType.BUS, "12:15:30")

    assert order_departures([late, early, middle]) == [early, middle, late]


def test_when_keys_tie_then_input_order_is_kept() -> None:
    """Given identical type and time, when ordering, then the upstream order is preserved."""
    first = _item(TransportType.TRAIN, "12:10", destination="Køge")
    second = _item(TransportType.TRAIN, "12:10", destination="Hillerød")
    earlier = _item(TransportType.TRAIN, "12:00")

    result = order_departures([first, second, earlier])

    assert result == [earlier, first, second]


def test_when_type_missing_then_falls_through_to_time() -> None:
    """Given one item without type, when comparing, then time decides."""
    untyped = _item(None, "12:00")
    train = _item(TransportType.TRAIN, "12:30")

    assert compare_departures(untyped, train) < 0
    assert compare_departures(train, untyped) > 0


def test_when_board_spans_midnight_then_ordered_chronologically() -> None:
    """Given departures on both sides of midnight, when ordering, then the date is respected."""
    after_midnight = _item(TransportType.BUS, "00:05", date="2026-03-11")
    before_midnight = _item(TransportType.BUS, "23:55", date="2026-03-10")

    assert order_departures([after_midnight, before_midnight]) == [
        before_midnight,
        after_midnight,
    ]


def test_when_date_missing_then_time_string_is_used() -> None:
    """Given items without dates, when ordering, then the time string decides."""
    late = _item(TransportType.BUS, "12:30", date="")
    early = _item(TransportType.BUS, "12:05", date="")

    assert order_departures([late, early]) == [early, late]


def test_when_ordering_then_returns_new_list() -> None:
    """Given a list, when ordering, then the input list is left as it was."""
    items = [_item(TransportType.TRAIN, "12:00"), _item(TransportType.BUS, "12:00")]
    original = list(items)

    result = order_departures(items)

    assert items == original
    assert result is not items


def test_when_unknown_type_then_sorted_after_train() -> None:
    """Given an Unknown type, when ordering, then it sorts by its text after Train."""
    unknown = _item(TransportType.UNKNOWN, "11:00")
    train = _item(TransportType.TRAIN, "12:00")
    bus = _item(TransportType.BUS, "13:00")

    assert order_departures([unknown, train, bus]) == [bus, train, unknown]
