"""User settings service."""

from dataclasses import dataclass
from typing import Protocol

from picngo.domain.settings import Language, UserSettings

API_KEY_STORAGE_KEY = "openai_api_key"
LANGUAGE_STORAGE_KEY = "app_language"


class SettingsRepository(Protocol):
    """Key-value persistence for user settings."""

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if any."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""


@dataclass
class SettingsService:
    """Service for reading and updating the API key and response language."""

    repository: SettingsRepository

    def load(self) -> UserSettings:
        """Return the current settings, using defaults for unset values."""
        return UserSettings(
            api_key=self.repository.get(API_KEY_STORAGE_KEY) or "",
            language=Language.parse(self.repository.get(LANGUAGE_STORAGE_KEY)),
        )

    def save_api_key(self, api_key: str) -> UserSettings:
        """Persist a trimmed API key."""
        self.repository.set(API_KEY_STORAGE_KEY, api_key.strip())
        return self.load()

    def clear_api_key(self) -> UserSettings:
        """Remove the stored API key."""
        self.repository.set(API_KEY_STORAGE_KEY, "")
        return self.load()

    def set_language(self, language: Language) -> UserSettings:
        """Persist the preferred response language."""
        self.repository.set(LANGUAGE_STORAGE_KEY, language.value)
        return self.load()
