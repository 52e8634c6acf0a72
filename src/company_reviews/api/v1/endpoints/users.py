"""Public user profile endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from sqlalchemy import func

from company_reviews.api.v1.dependencies import SessionDep, http_error
from company_reviews.models import Review
from company_reviews.schemas.user import UserSummary
from company_reviews.services import user_service
from company_reviews.services.errors import ReviewServiceError

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}")
async def get_user_profile(user_id: int, db: SessionDep) -> dict[str, Any]:
    """Return a user's public profile with simple review activity counts."""
    try:
        user = user_service.get_user(db, user_id)
    except ReviewServiceError as err:
        raise http_error(err) from err

    total_reviews = (
        db.query(func.count()).select_from(Review).filter(Review.user_id == user_id).scalar() or 0
    )
    helpful_received = (
        db.query(func.coalesce(func.sum(Review.helpful_votes), 0))
        .filter(Review.user_id == user_id)
        .scalar()
        or 0
    )
    return {
        "user": UserSummary.model_validate(user).model_dump(),
        "total_reviews": int(total_reviews),
        "helpful_votes_received": int(helpful_received),
    }
