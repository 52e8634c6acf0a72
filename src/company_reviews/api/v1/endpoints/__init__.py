# src/company_reviews/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .companies import router as companies_router
from .reviews import router as reviews_router
from .system import router as system_router
from .users import router as users_router
from .votes import router as votes_router

__all__ = [
    "auth_router",
    "companies_router",
    "reviews_router",
    "system_router",
    "users_router",
    "votes_router",
]
