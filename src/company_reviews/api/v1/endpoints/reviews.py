# src/company_reviews/api/v1/endpoints/reviews.py
"""Review-related endpoints for the company review API."""

from __future__ import annotations

from fastapi import APIRouter, Query, Response, status
from sqlalchemy.orm import Session

from company_reviews.api.v1.dependencies import (
    CurrentUserDep,
    OptionalUserDep,
    SessionDep,
    http_error,
)
from company_reviews.core.settings import settings
from company_reviews.models import Review, User
from company_reviews.schemas.common import Pagination
from company_reviews.schemas.review import (
    ReviewCreate,
    ReviewPage,
    ReviewResponse,
    ReviewSort,
    ReviewStatsResponse,
    ReviewUpdate,
)
from company_reviews.services import review_service, vote_ledger
from company_reviews.services.errors import ReviewServiceError
from company_reviews.services.review_service import Page

router = APIRouter(prefix="/reviews", tags=["reviews"])


def _to_response(review: Review, user_vote: str | None = None) -> ReviewResponse:
    return ReviewResponse.model_validate(review).model_copy(update={"user_vote": user_vote})


def _to_page(db: Session, page: Page, viewer: User | None) -> ReviewPage:
    votes: dict[int, str] = {}
    if viewer is not None:
        votes = vote_ledger.user_votes_for(db, (r.id for r in page.items), viewer.id)
    return ReviewPage(
        data=[_to_response(review, votes.get(review.id)) for review in page.items],
        pagination=Pagination(
            current=page.current,
            total=page.total_pages,
            limit=page.limit,
            total_reviews=page.total_reviews,
        ),
    )


def _page_limit(limit: int | None) -> int:
    if limit is None:
        return settings.default_page_size
    return min(limit, settings.max_page_size)


@router.get("/company/{company_id}", response_model=ReviewPage)
async def list_company_reviews(
    company_id: int,
    db: SessionDep,
    viewer: OptionalUserDep,
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int | None = Query(None, ge=1, description="Reviews per page"),
    sort: ReviewSort = Query("newest", description="Ordering of the reviews"),
) -> ReviewPage:
    """List a company's reviews; authenticated callers also see their own votes."""
    try:
        result = review_service.list_company_reviews(
            db, company_id, page=page, limit=_page_limit(limit), sort=sort
        )
    except ReviewServiceError as err:
        raise http_error(err) from err
    return _to_page(db, result, viewer)


@router.get("/company/{company_id}/stats", response_model=ReviewStatsResponse)
async def get_company_review_stats(company_id: int, db: SessionDep) -> ReviewStatsResponse:
    """Return rating statistics for a company."""
    try:
        stats = review_service.get_review_stats(db, company_id)
    except ReviewServiceError as err:
        raise http_error(err) from err
    return ReviewStatsResponse(
        average_rating=stats.average_rating,
        total_reviews=stats.total_reviews,
        rating_distribution=stats.rating_distribution,
        recommendation_rate=stats.recommendation_rate,
    )


@router.get("/user/{user_id}", response_model=ReviewPage)
async def list_user_reviews(
    user_id: int,
    db: SessionDep,
    viewer: OptionalUserDep,
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
) -> ReviewPage:
    """List the reviews written by a user, newest first."""
    result = review_service.list_user_reviews(db, user_id, page=page, limit=_page_limit(limit))
    return _to_page(db, result, viewer)


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: int, db: SessionDep, viewer: OptionalUserDep) -> ReviewResponse:
    """Get a specific review by ID."""
    try:
        review = review_service.get_review(db, review_id)
    except ReviewServiceError as err:
        raise http_error(err) from err
    user_vote = vote_ledger.get_user_vote(db, review.id, viewer.id) if viewer else None
    return _to_response(review, user_vote)


@router.post("/",
          response_model=ReviewResponse,
          status_code=status.HTTP_201_CREATED)
async def create_review(
    review_data: ReviewCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> ReviewResponse:
    """Create a review; each user may review a company once."""
    try:
        review = review_service.create_review(db, current_user, review_data)
    except ReviewServiceError as err:
        raise http_error(err) from err
    return _to_response(review)


@router.put("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: int,
    review_data: ReviewUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> ReviewResponse:
    """Edit a review's content (author only)."""
    try:
        review = review_service.update_review(db, review_id, current_user, review_data)
    except ReviewServiceError as err:
        raise http_error(err) from err
    return _to_response(review)


@router.delete(
    "/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_review(
    review_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Response:
    """Delete a review (author or admin)."""
    try:
        review_service.delete_review(db, review_id, current_user)
    except ReviewServiceError as err:
        raise http_error(err) from err
    return Response(status_code=status.HTTP_204_NO_CONTENT)
