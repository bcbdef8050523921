"""Storage contract consumed by :class:`RecommendationService`."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from recommendations_backend.services.models import (
    CreateRecommendationData,
    Recommendation,
    ScoreDirection,
)


class RecommendationRepository(ABC):
    """Persists recommendation rows.

    Every method is an independent unit of work: implementations commit before returning and never hold a transaction
    open across calls.
    """

    @abstractmethod
    async def create(self, data: CreateRecommendationData) -> None:
        """Insert a row with ``score = 0``. Raises a ``conflict`` error if the name is already stored."""

    @abstractmethod
    async def find(self, recommendation_id: int) -> Recommendation | None:
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Recommendation | None:
        pass

    @abstractmethod
    async def update_score(self, recommendation_id: int, direction: ScoreDirection) -> Recommendation | None:
        """Atomically add or subtract one from the score and return the updated row.

        Returns ``None`` if the row vanished between lookup and update.
        """

    @abstractmethod
    async def remove(self, recommendation_id: int) -> None:
        pass

    @abstractmethod
    async def find_all(self) -> Sequence[Recommendation]:
        pass

    @abstractmethod
    async def get_top_by_score(self, amount: int) -> Sequence[Recommendation]:
        """Return at most ``amount`` rows ordered by descending score."""


__all__ = ["RecommendationRepository"]
