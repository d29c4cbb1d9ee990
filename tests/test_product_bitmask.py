"""Tests for the departure board product filter."""

import pytest

from rejse_departures.application.services.product_bitmask import product_bitmask
from rejse_departures.domain.models import TransportMode, TransportModes

PRODUCT_BITS = {TransportMode.BUS: 32, TransportMode.TRAIN: 16}


def test_when_no_mode_enabled_then_zero() -> None:
    """Given no enabled modes, when building the mask, then it is 0 (unfiltered)."""
    assert product_bitmask(TransportModes(), PRODUCT_BITS) == 0


@pytest.mark.parametrize(
    ("modes", "expected"),
    [
        (TransportModes(bus=True), 32),
        (TransportModes(train=True), 16),
        (TransportModes(bus=True, train=True), 48),
    ],
)
def test_when_modes_enabled_then_bits_combined(modes: TransportModes, expected: int) -> None:
    """Given enabled modes, when building the mask, then their bits are OR'd together."""
    assert product_bitmask(modes, PRODUCT_BITS) == expected


def test_when_both_enabled_then_distinct_from_each_bit() -> None:
    """Given both modes, when building the mask, then it differs from either bit alone."""
    both = product_bitmask(TransportModes(bus=True, train=True), PRODUCT_BITS)

    assert both == PRODUCT_BITS[TransportMode.BUS] | PRODUCT_BITS[TransportMode.TRAIN]
    assert both not in PRODUCT_BITS.values()


def test_when_provider_uses_other_bits_then_table_is_honoured() -> None:
    """Given an older provider table, when building the mask, then those bits are used."""
    legacy_bits = {TransportMode.BUS: 4, TransportMode.TRAIN: 16}

    assert product_bitmask(TransportModes(bus=True, train=True), legacy_bits) == 20
