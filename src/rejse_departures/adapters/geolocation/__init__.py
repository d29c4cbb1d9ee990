"""Geolocation adapters."""

from rejse_departures.adapters.geolocation.configured_geolocator import ConfiguredGeolocator

__all__ = ["ConfiguredGeolocator"]
