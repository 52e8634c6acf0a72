# src/company_reviews/models/__init__.py
"""SQLAlchemy models for the company review application."""

from .company import Company
from .review import Review
from .user import User
from .vote import ReviewVote

__all__ = [
    "Company",
    "Review",
    "ReviewVote",
    "User",
]
