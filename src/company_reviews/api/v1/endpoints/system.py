"""System and transparency endpoints for the company review API."""

from __future__ import annotations

from fastapi import APIRouter

from company_reviews.core.settings import settings
from company_reviews.models.review import CATEGORY_RATINGS, EMPLOYMENT_TYPES, EXPERIENCE_LENGTHS
from company_reviews.models.vote import VOTE_VALUES

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return a sanitized snapshot of public runtime configuration.

    Excludes secrets and connection strings; clients use the enumerations to
    build review forms.
    """
    return {
        "app": {
            "name": settings.app_name,
            "version": settings.app_version,
            "jwt_algorithm": settings.jwt_algorithm,
            "access_token_expire_minutes": settings.access_token_expire_minutes,
            "debug": settings.debug,
        },
        "pagination": {
            "default_page_size": settings.default_page_size,
            "max_page_size": settings.max_page_size,
        },
        "reviews": {
            "rating_min": 1,
            "rating_max": 5,
            "rating_step": 0.5,
            "category_ratings": list(CATEGORY_RATINGS),
            "employment_types": list(EMPLOYMENT_TYPES),
            "experience_lengths": list(EXPERIENCE_LENGTHS),
            "vote_values": list(VOTE_VALUES),
        },
    }
