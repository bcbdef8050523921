"""Shared FastAPI dependency providers and application lifespan management."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine

from recommendations_backend.config import Settings, get_settings
from recommendations_backend.repositories.base import RecommendationRepository
from recommendations_backend.repositories.database import build_engine, build_session_factory
from recommendations_backend.repositories.sql import SqlRecommendationRepository, create_schema
from recommendations_backend.services.random_source import RandomSource
from recommendations_backend.services.recommendation_service import RecommendationService
from recommendations_backend.utils.logging import get_logger


@dataclass(slots=True)
class AppState:
    """Holds singletons that should be reused across requests."""

    recommendation_service: RecommendationService


def settings() -> Settings:
    """Expose the cached settings instance for dependency injection."""

    return get_settings()


@asynccontextmanager
async def lifespan_dependencies(
    app_settings: Settings,
    repository: RecommendationRepository | None = None,
    random_source: RandomSource | None = None,
) -> AsyncIterator[AppState]:
    """Build the repository and service at startup and dispose of the engine on shutdown.

    A ready-made ``repository`` skips engine creation entirely.
    """

    logger = get_logger(app_settings.logging.level)
    engine: AsyncEngine | None = None
    if repository is None:
        engine = build_engine(app_settings.database, logger)
        if app_settings.database.create_schema:
            await create_schema(engine)
        repository = SqlRecommendationRepository(build_session_factory(engine))

    service = RecommendationService(repository, random_source=random_source, logger=logger)
    try:
        yield AppState(recommendation_service=service)
    finally:
        if engine is not None:
            await engine.dispose()


def app_state(request: Request) -> AppState:
    """Fetch the :class:`AppState` built by FastAPI's lifespan."""

    state = getattr(request.app.state, "recommendations_state", None)
    assert isinstance(state, AppState), "App state missing; ensure lifespan wiring executed."
    return state


def recommendation_service_dep(state: AppState = Depends(app_state)) -> RecommendationService:
    """Return the recommendation service singleton."""

    return state.recommendation_service


__all__ = [
    "AppState",
    "settings",
    "lifespan_dependencies",
    "app_state",
    "recommendation_service_dep",
]
