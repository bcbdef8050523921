"""FastAPI application factory for the recommendations backend."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recommendations_backend.api import recommendations
from recommendations_backend.api.dependencies import lifespan_dependencies, settings
from recommendations_backend.api.errors import register_error_handlers
from recommendations_backend.config import Settings
from recommendations_backend.repositories.base import RecommendationRepository
from recommendations_backend.services.random_source import RandomSource
from recommendations_backend.utils.logging import get_logger


def create_app(
    app_settings: Settings | None = None,
    *,
    repository: RecommendationRepository | None = None,
    random_source: RandomSource | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``repository`` and ``random_source`` replace the SQL repository and the system random generator, which lets tests
    run the full HTTP stack against in-memory collaborators.
    """

    app_settings = app_settings or settings()
    logger = get_logger(app_settings.logging.level)
    logger.info("starting recommendations backend", extra={"port": app_settings.api.port})

    async def lifespan(app: FastAPI):
        async with lifespan_dependencies(app_settings, repository, random_source) as state:
            app.state.recommendations_state = state
            yield
            del app.state.recommendations_state

    app = FastAPI(title="Recommendations", lifespan=lifespan)

    if app_settings.api.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.api.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)
    app.include_router(recommendations.router)

    @app.get("/healthz")
    async def readiness() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()

__all__ = ["create_app", "app"]
