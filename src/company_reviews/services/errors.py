"""Exceptions raised by the service layer.

Endpoints translate these into HTTP responses; services never build
``HTTPException`` themselves.
"""

from __future__ import annotations


class ReviewServiceError(RuntimeError):
    """Base exception for expected, caller-facing service failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ReviewServiceError):
    """Raised when a company, review or user does not exist."""


class ConflictError(ReviewServiceError):
    """Raised when a write would violate a uniqueness rule."""


class ForbiddenError(ReviewServiceError):
    """Raised when the actor may not perform the operation on the target."""


class InvalidVoteError(ReviewServiceError):
    """Raised when a vote value is neither 'helpful' nor 'unhelpful'."""
