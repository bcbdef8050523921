"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence

import pytest

from recommendations_backend.config import DatabaseSettings
from recommendations_backend.repositories.base import RecommendationRepository
from recommendations_backend.repositories.database import build_engine, build_session_factory
from recommendations_backend.repositories.sql import SqlRecommendationRepository, create_schema
from recommendations_backend.services.models import (
    CreateRecommendationData,
    Recommendation,
    ScoreDirection,
)
from recommendations_backend.services.random_source import SequenceRandom
from recommendations_backend.services.recommendation_service import RecommendationService
from recommendations_backend.utils.errors import conflict_error

YOUTUBE_LINK = "https://youtu.be/Jhqj0TdxzQA"


class InMemoryRecommendationRepository(RecommendationRepository):
    """Dictionary-backed repository used to exercise the service without a database."""

    def __init__(self) -> None:
        self.rows: dict[int, Recommendation] = {}
        self._ids = itertools.count(1)

    def add(self, name: str, score: int = 0, youtube_link: str = YOUTUBE_LINK) -> Recommendation:
        recommendation = Recommendation(id=next(self._ids), name=name, youtube_link=youtube_link, score=score)
        self.rows[recommendation.id] = recommendation
        return recommendation

    async def create(self, data: CreateRecommendationData) -> None:
        if any(row.name == data.name for row in self.rows.values()):
            raise conflict_error("Recommendations names must be unique")
        self.add(data.name, youtube_link=data.youtube_link)

    async def find(self, recommendation_id: int) -> Recommendation | None:
        return self.rows.get(recommendation_id)

    async def find_by_name(self, name: str) -> Recommendation | None:
        return next((row for row in self.rows.values() if row.name == name), None)

    async def update_score(self, recommendation_id: int, direction: ScoreDirection) -> Recommendation | None:
        row = self.rows.get(recommendation_id)
        if row is None:
            return None
        row.score += 1 if direction == "increment" else -1
        return Recommendation(id=row.id, name=row.name, youtube_link=row.youtube_link, score=row.score)

    async def remove(self, recommendation_id: int) -> None:
        self.rows.pop(recommendation_id, None)

    async def find_all(self) -> Sequence[Recommendation]:
        return list(self.rows.values())

    async def get_top_by_score(self, amount: int) -> Sequence[Recommendation]:
        return sorted(self.rows.values(), key=lambda row: row.score, reverse=True)[:amount]


@pytest.fixture
def logger():
    """Quiet logger so service tests do not install the Rich handler."""
    quiet = logging.getLogger("recommendations.tests")
    quiet.addHandler(logging.NullHandler())
    quiet.propagate = False
    return quiet


@pytest.fixture
def repository():
    """Empty in-memory repository."""
    return InMemoryRecommendationRepository()


@pytest.fixture
def make_service(repository, logger):
    """Build a service over the in-memory repository with a scripted random source."""

    def _make(*draws: float) -> RecommendationService:
        return RecommendationService(repository, random_source=SequenceRandom(draws or (0.5,)), logger=logger)

    return _make


@pytest.fixture
def service(make_service):
    return make_service()


@pytest.fixture
def sqlite_settings(tmp_path):
    """Database settings pointing at a throwaway SQLite file."""
    return DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'recommendations.db'}")


@pytest.fixture
async def sql_repository(sqlite_settings, logger):
    """SQL repository over a freshly created SQLite schema."""
    engine = build_engine(sqlite_settings, logger)
    await create_schema(engine)
    yield SqlRecommendationRepository(build_session_factory(engine))
    await engine.dispose()
