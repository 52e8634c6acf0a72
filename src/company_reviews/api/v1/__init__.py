# src/company_reviews/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    companies_router,
    reviews_router,
    system_router,
    users_router,
    votes_router,
)

__all__ = [
    "auth_router",
    "companies_router",
    "reviews_router",
    "votes_router",
    "system_router",
    "users_router",
]
