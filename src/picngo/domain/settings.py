"""User-facing settings: API credential and response language."""

from dataclasses import dataclass
from enum import StrEnum


class Language(StrEnum):
    """Language the model is asked to respond in."""

    ENGLISH = "en"
    JAPANESE = "ja"
    CHINESE = "zh"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def prompt_instruction(self) -> str:
        """Directive appended to every prompt so the reply uses this language."""
        return _PROMPT_INSTRUCTIONS[self]

    @classmethod
    def parse(cls, raw: str | None) -> "Language":
        """Return the language for a stored tag, defaulting to English."""
        if raw is None:
            return cls.ENGLISH
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.ENGLISH


_DISPLAY_NAMES = {
    Language.ENGLISH: "English",
    Language.JAPANESE: "日本語",
    Language.CHINESE: "中文",
}

_PROMPT_INSTRUCTIONS = {
    Language.ENGLISH: "Respond entirely in English.",
    Language.JAPANESE: "日本語で回答してください。",
    Language.CHINESE: "请用中文回答。",
}


@dataclass(frozen=True)
class UserSettings:
    """Snapshot of the settings used for a single analysis request."""

    api_key: str = ""
    language: Language = Language.ENGLISH

    @property
    def has_valid_key(self) -> bool:
        return bool(self.api_key.strip())
