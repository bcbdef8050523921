"""Async SQLAlchemy engine and session factory construction."""

from __future__ import annotations

from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from recommendations_backend.config import DatabaseSettings
from recommendations_backend.utils.logging import Logger


def mask_url(url: str) -> str:
    """Hide the password of a database URL so it can be logged."""

    return make_url(url).render_as_string(hide_password=True)


def _engine_options(settings: DatabaseSettings) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": settings.echo}
    if settings.is_sqlite:
        return options
    options.update(
        pool_pre_ping=True,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_recycle=settings.pool_recycle_seconds,
        connect_args={"server_settings": {"application_name": "recommendations_backend"}},
    )
    return options


def build_engine(settings: DatabaseSettings, logger: Logger) -> AsyncEngine:
    """Create the async engine described by ``settings``."""

    engine = create_async_engine(settings.url, **_engine_options(settings))
    logger.info("database_engine_created", extra={"url": mask_url(settings.url)})
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return a session factory whose sessions keep loaded attributes after commit."""

    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


__all__ = ["build_engine", "build_session_factory", "mask_url"]
