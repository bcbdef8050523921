"""Recommendation submission, listing and voting endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response, status

from recommendations_backend.services.recommendation_service import RecommendationService

from .dependencies import recommendation_service_dep
from .schemas import ErrorResponse, RecommendationCreate, RecommendationOut

router = APIRouter(prefix="/recommendations", tags=["recommendations"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Recommendation not found"}}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={409: {"model": ErrorResponse, "description": "Name already taken"}},
)
async def create_recommendation(
    payload: RecommendationCreate,
    service: RecommendationService = Depends(recommendation_service_dep),
) -> Response:
    """Store a new recommendation with a score of zero."""

    await service.insert(payload.to_domain())
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=list[RecommendationOut])
async def list_recommendations(
    service: RecommendationService = Depends(recommendation_service_dep),
) -> list[RecommendationOut]:
    recommendations = await service.get()
    return [RecommendationOut.from_domain(item) for item in recommendations]


# Registered before "/{recommendation_id}" so the literal paths win.
@router.get("/random", response_model=RecommendationOut, responses=_NOT_FOUND)
async def random_recommendation(
    service: RecommendationService = Depends(recommendation_service_dep),
) -> RecommendationOut:
    """Return one recommendation, biased towards popular ones."""

    return RecommendationOut.from_domain(await service.get_random())


@router.get("/top/{amount}", response_model=list[RecommendationOut])
async def top_recommendations(
    amount: int = Path(..., ge=0),
    service: RecommendationService = Depends(recommendation_service_dep),
) -> list[RecommendationOut]:
    """Return up to ``amount`` recommendations ordered by descending score."""

    recommendations = await service.get_top(amount)
    return [RecommendationOut.from_domain(item) for item in recommendations]


@router.get("/{recommendation_id}", response_model=RecommendationOut, responses=_NOT_FOUND)
async def get_recommendation(
    recommendation_id: int,
    service: RecommendationService = Depends(recommendation_service_dep),
) -> RecommendationOut:
    return RecommendationOut.from_domain(await service.get_by_id(recommendation_id))


@router.post("/{recommendation_id}/upvote", response_class=Response, responses=_NOT_FOUND)
async def upvote_recommendation(
    recommendation_id: int,
    service: RecommendationService = Depends(recommendation_service_dep),
) -> Response:
    await service.upvote(recommendation_id)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/{recommendation_id}/downvote", response_class=Response, responses=_NOT_FOUND)
async def downvote_recommendation(
    recommendation_id: int,
    service: RecommendationService = Depends(recommendation_service_dep),
) -> Response:
    """Subtract one point; the recommendation is deleted once its score drops below -5."""

    await service.downvote(recommendation_id)
    return Response(status_code=status.HTTP_200_OK)


__all__ = ["router"]
