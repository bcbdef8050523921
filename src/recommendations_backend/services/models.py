"""Domain models shared by the service and repository layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ScoreDirection = Literal["increment", "decrement"]

POPULAR_SCORE_THRESHOLD = 10


@dataclass(slots=True)
class CreateRecommendationData:
    """Caller-provided fields for a new recommendation."""

    name: str
    youtube_link: str


@dataclass(slots=True)
class Recommendation:
    """A named video link with a popularity score."""

    id: int
    name: str
    youtube_link: str
    score: int = 0

    @property
    def is_popular(self) -> bool:
        """Whether the random picker treats this recommendation as popular."""

        return self.score > POPULAR_SCORE_THRESHOLD


__all__ = ["CreateRecommendationData", "Recommendation", "ScoreDirection", "POPULAR_SCORE_THRESHOLD"]
