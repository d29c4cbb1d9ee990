"""Departure board product filter."""

from collections.abc import Mapping

from rejse_departures.domain.models.place import TransportMode, TransportModes


def product_bitmask(modes: TransportModes, product_bits: Mapping[TransportMode, int]) -> int:
    """OR together the product bits of the enabled modes.

    No enabled mode yields 0, which the journey planner treats as unfiltered.
    """
    mask = 0
    for mode in modes.enabled():
        mask |= product_bits[mode]
    return mask
