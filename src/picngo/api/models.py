"""Request and response models for the HTTP API."""

from pydantic import BaseModel, Field, field_validator, model_validator

from picngo.domain.analysis import FoodAnalysisResult, HealthLevel, IngredientAnalysis
from picngo.domain.settings import Language, UserSettings


class SettingsUpdate(BaseModel):
    """Partial update of the stored settings."""

    api_key: str | None = None
    clear_api_key: bool = False
    language: Language | None = None

    @field_validator("api_key")
    @classmethod
    def _api_key_not_blank(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("api_key must not be blank")
        return value

    @model_validator(mode="after")
    def _clear_or_save(self) -> "SettingsUpdate":
        if self.clear_api_key and self.api_key is not None:
            raise ValueError("api_key and clear_api_key cannot be combined")
        return self


class SettingsView(BaseModel):
    """Settings as shown to the user; the key itself is never returned."""

    has_api_key: bool
    language: Language
    language_name: str
    model: str

    @classmethod
    def from_settings(cls, settings: UserSettings, model: str) -> "SettingsView":
        return cls(
            has_api_key=settings.has_valid_key,
            language=settings.language,
            language_name=settings.language.display_name,
            model=model,
        )


class LanguageOption(BaseModel):
    code: Language
    name: str


class HealthLevelView(BaseModel):
    level: HealthLevel
    label: str
    emoji: str
    color: str

    @classmethod
    def from_level(cls, level: HealthLevel) -> "HealthLevelView":
        return cls(level=level, label=level.label, emoji=level.emoji, color=level.color)


class FoodAnalysisResponse(BaseModel):
    """Food analysis plus its presentation tier."""

    result: FoodAnalysisResult
    health_level: HealthLevelView


class IngredientRequest(BaseModel):
    name: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("name must not be blank")
        return stripped


class IngredientAnalysisResponse(BaseModel):
    name: str
    result: IngredientAnalysis


class ErrorResponse(BaseModel):
    """Body returned for a failed analysis; the same request may be retried."""

    error: str
    kind: str
    retryable: bool = True
