"""Configuration store port."""

from typing import Protocol


class ConfigStore(Protocol):
    """Key-value store for the persisted trip configuration."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""
        ...
