# src/company_reviews/services/__init__.py
"""Business logic services for the company review application."""

from .errors import (
    ConflictError,
    ForbiddenError,
    InvalidVoteError,
    NotFoundError,
    ReviewServiceError,
)
from .vote_ledger import VoteResult

__all__ = [
    "ConflictError",
    "ForbiddenError",
    "InvalidVoteError",
    "NotFoundError",
    "ReviewServiceError",
    "VoteResult",
]
