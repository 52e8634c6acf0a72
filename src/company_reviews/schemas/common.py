"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, Field


class Pagination(BaseModel):
    """Page metadata returned by paged list endpoints."""

    current: int = Field(..., ge=1, description="Current page number (1-based).")
    total: int = Field(..., ge=0, description="Total number of pages.")
    limit: int = Field(..., ge=1, description="Page size.")
    total_reviews: int = Field(..., ge=0, description="Total number of matching reviews.")
