"""Models for food and ingredient analysis results."""

from enum import Enum, StrEnum

from pydantic import BaseModel, ConfigDict


class HealthLevel(StrEnum):
    """Presentation tier derived from a free-text health rating."""

    HEALTHY = "healthy"
    MODERATE = "moderate"
    UNHEALTHY = "unhealthy"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def emoji(self) -> str:
        return _HEALTH_EMOJI[self]

    @property
    def color(self) -> str:
        return _HEALTH_COLOR[self]

    @classmethod
    def from_rating(cls, rating: str) -> "HealthLevel":
        """Classify a rating, falling back to moderate for unknown values."""
        normalized = rating.strip().lower()
        if normalized == "healthy":
            return cls.HEALTHY
        if normalized == "unhealthy":
            return cls.UNHEALTHY
        return cls.MODERATE

    @classmethod
    def is_known_rating(cls, rating: str) -> bool:
        """Return True when the rating is one of the closed enumeration values."""
        return rating.strip().lower() in {level.value for level in cls}


_HEALTH_EMOJI = {
    HealthLevel.HEALTHY: "✅",
    HealthLevel.MODERATE: "⚠️",
    HealthLevel.UNHEALTHY: "❌",
}

_HEALTH_COLOR = {
    HealthLevel.HEALTHY: "green",
    HealthLevel.MODERATE: "orange",
    HealthLevel.UNHEALTHY: "red",
}


class FoodAnalysisResult(BaseModel):
    """Nutritional assessment of a photographed dish."""

    model_config = ConfigDict(frozen=True, strict=True)

    food_name: str
    ingredients: list[str]
    calories_estimate: str
    health_rating: str
    health_assessment: str
    tips: list[str]

    @property
    def health_level(self) -> HealthLevel:
        return HealthLevel.from_rating(self.health_rating)


class IngredientAnalysis(BaseModel):
    """Detail lookup for a single ingredient."""

    model_config = ConfigDict(frozen=True, strict=True)

    what_it_is: str
    nutritional_highlights: list[str]
    health_benefits: list[str]
    health_concerns: list[str]
    recommended_amount: str


AnalysisRecord = FoodAnalysisResult | IngredientAnalysis


class AnalysisKind(Enum):
    """Variant tag selecting the record type and token bound for a request."""

    FOOD = ("food analysis", FoodAnalysisResult, 1024)
    INGREDIENT = ("ingredient analysis", IngredientAnalysis, 600)

    def __init__(
        self, label: str, record_type: type[AnalysisRecord], max_tokens: int
    ) -> None:
        self.label = label
        self.record_type = record_type
        self.max_tokens = max_tokens
