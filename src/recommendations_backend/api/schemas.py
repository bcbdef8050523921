"""Request and response bodies for the recommendations API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from recommendations_backend.services.models import CreateRecommendationData, Recommendation

YOUTUBE_LINK_PATTERN = r"^https?://(www\.|m\.)?(youtube\.com|youtu\.be)/.+$"


class RecommendationCreate(BaseModel):
    """Body of ``POST /recommendations``."""

    name: str = Field(..., min_length=1, max_length=255)
    youtube_link: str = Field(..., alias="youtubeLink", pattern=YOUTUBE_LINK_PATTERN, max_length=2048)

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    def to_domain(self) -> CreateRecommendationData:
        return CreateRecommendationData(name=self.name, youtube_link=self.youtube_link)


class RecommendationOut(BaseModel):
    id: int
    name: str
    youtube_link: str = Field(alias="youtubeLink")
    score: int

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @classmethod
    def from_domain(cls, recommendation: Recommendation) -> "RecommendationOut":
        return cls.model_validate(recommendation)


class ErrorResponse(BaseModel):
    message: str


__all__ = ["RecommendationCreate", "RecommendationOut", "ErrorResponse", "YOUTUBE_LINK_PATTERN"]
