"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from picngo.config import Settings
from picngo.containers import AppContainer
from picngo.services.analysis import AnalysisService, InferenceClient
from picngo.services.user_settings import SettingsRepository, SettingsService

APPLE_PAYLOAD: dict[str, object] = {
    "food_name": "Apple",
    "ingredients": ["apple"],
    "calories_estimate": "~95 calories",
    "health_rating": "Healthy",
    "health_assessment": "Low calorie, high fiber.",
    "tips": ["Eat with skin for fiber"],
}

GARLIC_PAYLOAD: dict[str, object] = {
    "what_it_is": "A pungent bulb used as a seasoning.",
    "nutritional_highlights": ["Manganese", "Vitamin B6"],
    "health_benefits": ["May support heart health"],
    "health_concerns": ["Generally safe in normal amounts"],
    "recommended_amount": "1-2 cloves per day",
}


@dataclass
class InMemorySettingsRepository(SettingsRepository):
    """In-memory key-value store for tests."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


@dataclass
class FakeInferenceClient(InferenceClient):
    """Fake inference client returning a fixed reply and recording calls."""

    reply: str = field(default_factory=lambda: json.dumps(APPLE_PAYLOAD))
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        messages: list[dict[str, object]],
        api_key: str,
        max_tokens: int,
    ) -> str:
        self.calls.append(
            {"messages": messages, "api_key": api_key, "max_tokens": max_tokens}
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        openai_api_url="https://api.test/v1/chat/completions",
        settings_path=tmp_path / "settings.json",
        supabase_url=None,
        supabase_service_key=None,
    )


@pytest.fixture
def settings_repository() -> InMemorySettingsRepository:
    return InMemorySettingsRepository()


@pytest.fixture
def inference_client() -> FakeInferenceClient:
    return FakeInferenceClient()


@pytest.fixture
def container(
    settings: Settings,
    settings_repository: InMemorySettingsRepository,
    inference_client: FakeInferenceClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        settings_service=SettingsService(settings_repository),
        analysis_service=AnalysisService(client=inference_client),
        close_resources=close_resources,
    )
