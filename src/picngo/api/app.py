"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from picngo.api.models import (
    ErrorResponse,
    FoodAnalysisResponse,
    HealthLevelView,
    IngredientAnalysisResponse,
    IngredientRequest,
    LanguageOption,
    SettingsUpdate,
    SettingsView,
)
from picngo.app_logging import configure_logging
from picngo.containers import AppContainer
from picngo.domain.settings import Language
from picngo.errors import (
    AnalysisError,
    DecodeFailureError,
    HttpStatusError,
    ImageEncodingError,
    MalformedResponseError,
    MissingCredentialError,
    TransportFailureError,
)

_ERROR_STATUS_CODES: dict[type[AnalysisError], int] = {
    MissingCredentialError: 400,
    ImageEncodingError: 422,
    TransportFailureError: 504,
    HttpStatusError: 502,
    MalformedResponseError: 502,
    DecodeFailureError: 502,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="PicNGo", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(AnalysisError)
    async def analysis_error_handler(
        request: Request, exc: AnalysisError
    ) -> JSONResponse:
        logger.info("Analysis failed on %s: %s", request.url.path, exc.kind)
        body = ErrorResponse(error=exc.message, kind=exc.kind)
        return JSONResponse(
            status_code=_status_code_for(exc), content=body.model_dump()
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/languages")
    async def languages() -> list[LanguageOption]:
        """List the supported response languages."""
        return [
            LanguageOption(code=language, name=language.display_name)
            for language in Language
        ]

    @app.get("/settings")
    async def get_settings(request: Request) -> SettingsView:
        """Return the current settings without exposing the API key."""
        state_container: AppContainer = request.app.state.container
        return SettingsView.from_settings(
            state_container.settings_service.load(),
            model=state_container.settings.openai_model,
        )

    @app.put("/settings")
    async def update_settings(update: SettingsUpdate, request: Request) -> SettingsView:
        """Save or clear the API key and change the response language."""
        state_container: AppContainer = request.app.state.container
        settings_service = state_container.settings_service
        current = settings_service.load()
        if update.clear_api_key:
            current = settings_service.clear_api_key()
        elif update.api_key is not None:
            current = settings_service.save_api_key(update.api_key)
        if update.language is not None:
            current = settings_service.set_language(update.language)
        return SettingsView.from_settings(
            current, model=state_container.settings.openai_model
        )

    @app.post("/analyze/food")
    async def analyze_food(request: Request) -> FoodAnalysisResponse:
        """Analyze a food photo sent as the raw request body."""
        state_container: AppContainer = request.app.state.container
        user_settings = state_container.settings_service.load()
        image_bytes = await request.body()
        result = await state_container.analysis_service.analyze_food(
            image_bytes, user_settings
        )
        return FoodAnalysisResponse(
            result=result,
            health_level=HealthLevelView.from_level(result.health_level),
        )

    @app.post("/analyze/ingredient")
    async def analyze_ingredient(
        payload: IngredientRequest, request: Request
    ) -> IngredientAnalysisResponse:
        """Look up nutritional detail for one ingredient."""
        state_container: AppContainer = request.app.state.container
        user_settings = state_container.settings_service.load()
        result = await state_container.analysis_service.analyze_ingredient(
            payload.name, user_settings
        )
        return IngredientAnalysisResponse(name=payload.name, result=result)

    return app


def _status_code_for(exc: AnalysisError) -> int:
    for error_type, status_code in _ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return 500
