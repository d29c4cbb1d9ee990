"""JSON file backed key-value store for the persisted trip configuration."""

import json
import logging
import os
import tempfile
from pathlib import Path

from rejse_departures.domain.ports.config_store import ConfigStore

logger = logging.getLogger(__name__)


class JsonFileConfigStore(ConfigStore):
    """Stores string values by key in a single JSON object on disk."""

    def __init__(self, path: Path | str) -> None:
        """Initialize the store.

        Args:
            path: JSON file; created on first write.
        """
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read config store {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Config store {self.path} does not hold a JSON object, ignoring it")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None."""
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing the file atomically."""
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".store-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Stored '{key}' in {self.path}")
