"""Local JSON file repository for user settings."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from picngo.services.user_settings import SettingsRepository

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileSettingsRepository(SettingsRepository):
    """Stores settings as a flat JSON object in a local file."""

    path: Path

    def get(self, key: str) -> str | None:
        """Return the stored value for a key."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Write a value, creating the file and its directory if needed."""
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self.path)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            _logger.warning("Ignoring unreadable settings file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}
