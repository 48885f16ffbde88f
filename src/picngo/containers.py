"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from picngo.adapters.chat_completions_client import HttpxChatCompletionsClient
from picngo.adapters.json_file_settings_repository import JsonFileSettingsRepository
from picngo.adapters.supabase_settings_repository import SupabaseSettingsRepository
from picngo.config import Settings
from picngo.services.analysis import AnalysisService
from picngo.services.user_settings import SettingsRepository, SettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    settings_service: SettingsService
    analysis_service: AnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_settings_repository(settings: Settings) -> SettingsRepository:
    """Pick Supabase when configured, the local JSON file otherwise."""
    if settings.uses_supabase:
        supabase_client = create_client(
            settings.supabase_url, settings.supabase_service_key
        )
        return SupabaseSettingsRepository(supabase_client)
    return JsonFileSettingsRepository(settings.settings_path.expanduser())


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    settings_service = SettingsService(build_settings_repository(resolved_settings))
    inference_client = HttpxChatCompletionsClient.create(
        api_url=resolved_settings.openai_api_url,
        model=resolved_settings.openai_model,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )
    analysis_service = AnalysisService(client=inference_client)

    async def close_resources() -> None:
        await inference_client.close()

    return AppContainer(
        settings=resolved_settings,
        settings_service=settings_service,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )
