"""Business rules for creating, voting on and picking recommendations."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from recommendations_backend.repositories.base import RecommendationRepository
from recommendations_backend.services.models import CreateRecommendationData, Recommendation
from recommendations_backend.services.random_source import RandomSource, default_random_source
from recommendations_backend.utils.errors import conflict_error, not_found_error
from recommendations_backend.utils.logging import Logger, get_logger, log_structured

SCORE_FLOOR = -5
POPULAR_PROBABILITY = 0.7


class RecommendationService:
    """Orchestrates repository calls and enforces recommendation invariants.

    Each operation issues independent repository calls. ``insert`` (lookup then create) and ``downvote`` (decrement then
    conditional delete) are two round-trips each and can interleave with concurrent requests; the storage unique
    constraint on ``name`` is the only backstop.
    """

    def __init__(
        self,
        repository: RecommendationRepository,
        random_source: RandomSource | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._repository = repository
        self._random = random_source or default_random_source()
        self._logger = logger or get_logger()

    async def insert(self, data: CreateRecommendationData) -> None:
        existing = await self._repository.find_by_name(data.name)
        if existing is not None:
            log_structured(self._logger, "recommendation_conflict", recommendation_name=data.name)
            raise conflict_error("Recommendations names must be unique")

        await self._repository.create(data)
        log_structured(self._logger, "recommendation_created", recommendation_name=data.name)

    async def upvote(self, recommendation_id: int) -> None:
        """Add one point. Raises ``not_found`` if the row is missing or removed before the update lands."""

        await self.get_by_id(recommendation_id)
        updated = await self._repository.update_score(recommendation_id, "increment")
        if updated is None:
            raise not_found_error()
        log_structured(self._logger, "recommendation_upvoted", id=recommendation_id, score=updated.score)

    async def downvote(self, recommendation_id: int) -> None:
        """Subtract one point and delete the recommendation once its score falls below the floor."""

        await self.get_by_id(recommendation_id)
        updated = await self._repository.update_score(recommendation_id, "decrement")
        if updated is None:
            raise not_found_error()
        log_structured(self._logger, "recommendation_downvoted", id=recommendation_id, score=updated.score)

        if updated.score < SCORE_FLOOR:
            await self._repository.remove(recommendation_id)
            log_structured(self._logger, "recommendation_removed", id=recommendation_id, score=updated.score)

    async def get_by_id(self, recommendation_id: int) -> Recommendation:
        recommendation = await self._repository.find(recommendation_id)
        if recommendation is None:
            raise not_found_error()
        return recommendation

    async def get(self) -> Sequence[Recommendation]:
        return await self._repository.find_all()

    async def get_top(self, amount: int) -> Sequence[Recommendation]:
        if amount <= 0:
            return []
        return await self._repository.get_top_by_score(amount)

    async def get_random(self) -> Recommendation:
        """Pick a recommendation, favouring popular ones (score above 10) 70% of the time.

        The first draw chooses the bucket, the second chooses the item. An empty target bucket falls back to the other
        one, so a result is returned whenever any recommendation exists.
        """

        prefer_popular = self._random.random() < POPULAR_PROBABILITY

        popular: list[Recommendation] = []
        unpopular: list[Recommendation] = []
        for recommendation in await self._repository.find_all():
            (popular if recommendation.is_popular else unpopular).append(recommendation)

        preferred, fallback = (popular, unpopular) if prefer_popular else (unpopular, popular)
        bucket = preferred or fallback
        if not bucket:
            raise not_found_error()

        index = math.floor(self._random.random() * len(bucket))
        chosen = bucket[index]
        log_structured(
            self._logger,
            "random_recommendation_selected",
            level=logging.DEBUG,
            id=chosen.id,
            popular=chosen.is_popular,
            bucket_size=len(bucket),
        )
        return chosen


__all__ = ["RecommendationService", "SCORE_FLOOR", "POPULAR_PROBABILITY"]
