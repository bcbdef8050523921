"""SQLAlchemy implementation of :class:`RecommendationRepository`."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Integer, String, delete, select, text, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from recommendations_backend.repositories.base import RecommendationRepository
from recommendations_backend.services.models import (
    CreateRecommendationData,
    Recommendation,
    ScoreDirection,
)
from recommendations_backend.utils.errors import conflict_error

_SCORE_DELTAS: dict[str, int] = {"increment": 1, "decrement": -1}

# Upper bound of the 32-bit ``id`` column; larger ids cannot be stored, so they are never found.
MAX_ID = 2**31 - 1


def _storable_id(recommendation_id: int) -> bool:
    return -MAX_ID - 1 <= recommendation_id <= MAX_ID


class Base(DeclarativeBase):
    pass


class RecommendationRow(Base):
    __tablename__ = "recommendations"
    # SQLite would otherwise hand out the id of a deleted max row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    youtube_link: Mapped[str] = mapped_column(String(2048), nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default=text("0"))


async def create_schema(engine: AsyncEngine) -> None:
    """Create the recommendations table if it does not exist."""

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)


class SqlRecommendationRepository(RecommendationRepository):
    """Stores recommendations in a relational table, one short-lived session per call."""

    def __init__(self, sessions: async_sessionmaker[AsyncSession]) -> None:
        self._sessions = sessions

    async def create(self, data: CreateRecommendationData) -> None:
        try:
            async with self._sessions() as session, session.begin():
                session.add(RecommendationRow(name=data.name, youtube_link=data.youtube_link, score=0))
        except IntegrityError as exc:
            raise conflict_error("Recommendations names must be unique") from exc

    async def find(self, recommendation_id: int) -> Recommendation | None:
        if not _storable_id(recommendation_id):
            return None
        async with self._sessions() as session:
            row = await session.get(RecommendationRow, recommendation_id)
            return _to_domain(row) if row else None

    async def find_by_name(self, name: str) -> Recommendation | None:
        async with self._sessions() as session:
            row = await session.scalar(select(RecommendationRow).where(RecommendationRow.name == name))
            return _to_domain(row) if row else None

    async def update_score(self, recommendation_id: int, direction: ScoreDirection) -> Recommendation | None:
        if not _storable_id(recommendation_id):
            return None
        statement = (
            update(RecommendationRow)
            .where(RecommendationRow.id == recommendation_id)
            .values(score=RecommendationRow.score + _SCORE_DELTAS[direction])
            .returning(
                RecommendationRow.id,
                RecommendationRow.name,
                RecommendationRow.youtube_link,
                RecommendationRow.score,
            )
            .execution_options(synchronize_session=False)
        )
        async with self._sessions() as session, session.begin():
            result = await session.execute(statement)
            updated = result.one_or_none()
        if updated is None:
            return None
        return Recommendation(
            id=updated.id,
            name=updated.name,
            youtube_link=updated.youtube_link,
            score=updated.score,
        )

    async def remove(self, recommendation_id: int) -> None:
        if not _storable_id(recommendation_id):
            return
        async with self._sessions() as session, session.begin():
            await session.execute(
                delete(RecommendationRow)
                .where(RecommendationRow.id == recommendation_id)
                .execution_options(synchronize_session=False)
            )

    async def find_all(self) -> Sequence[Recommendation]:
        async with self._sessions() as session:
            rows = await session.scalars(select(RecommendationRow))
            return [_to_domain(row) for row in rows]

    async def get_top_by_score(self, amount: int) -> Sequence[Recommendation]:
        # The table never holds more rows than there are ids, so clamping keeps LIMIT within range.
        limit = min(amount, MAX_ID)
        async with self._sessions() as session:
            rows = await session.scalars(
                select(RecommendationRow).order_by(RecommendationRow.score.desc()).limit(limit)
            )
            return [_to_domain(row) for row in rows]


def _to_domain(row: RecommendationRow) -> Recommendation:
    return Recommendation(id=row.id, name=row.name, youtube_link=row.youtube_link, score=row.score)


__all__ = ["Base", "MAX_ID", "RecommendationRow", "SqlRecommendationRepository", "create_schema"]
