"""Storage adapters."""

from rejse_departures.adapters.storage.json_config_store import JsonFileConfigStore

__all__ = ["JsonFileConfigStore"]
