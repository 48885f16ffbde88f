"""Food and ingredient analysis using a remote chat-completion model."""

import logging
from dataclasses import dataclass
from typing import Protocol

from picngo.domain.analysis import (
    AnalysisKind,
    FoodAnalysisResult,
    HealthLevel,
    IngredientAnalysis,
)
from picngo.domain.settings import UserSettings
from picngo.errors import MissingCredentialError
from picngo.services.decoding import decode_analysis
from picngo.services.prompts import (
    food_analysis_messages,
    ingredient_analysis_messages,
)

_logger = logging.getLogger(__name__)


class InferenceClient(Protocol):
    """Interface for a single chat-completion call."""

    async def complete(
        self,
        messages: list[dict[str, object]],
        api_key: str,
        max_tokens: int,
    ) -> str:
        """Return the model's cleaned text reply."""


def require_credential(api_key: str) -> None:
    """Raise MissingCredentialError when the key is blank."""
    if not api_key.strip():
        raise MissingCredentialError()


@dataclass
class AnalysisService:
    """Service that builds prompts, calls the model, and decodes results."""

    client: InferenceClient

    async def analyze_food(
        self, image_bytes: bytes, settings: UserSettings
    ) -> FoodAnalysisResult:
        """Analyze a food photo."""
        require_credential(settings.api_key)
        messages = food_analysis_messages(image_bytes, settings.language)
        text = await self.client.complete(
            messages, settings.api_key, AnalysisKind.FOOD.max_tokens
        )
        result = decode_analysis(text, AnalysisKind.FOOD)
        if not HealthLevel.is_known_rating(result.health_rating):
            _logger.warning(
                "Unrecognized health_rating %r for %r; treating as %s",
                result.health_rating,
                result.food_name,
                result.health_level.value,
            )
        return result

    async def analyze_ingredient(
        self, name: str, settings: UserSettings
    ) -> IngredientAnalysis:
        """Look up nutritional detail for a single ingredient."""
        require_credential(settings.api_key)
        messages = ingredient_analysis_messages(name, settings.language)
        text = await self.client.complete(
            messages, settings.api_key, AnalysisKind.INGREDIENT.max_tokens
        )
        return decode_analysis(text, AnalysisKind.INGREDIENT)
