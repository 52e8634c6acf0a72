"""Review-related Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from company_reviews.schemas.common import Pagination
from company_reviews.schemas.company import CompanySummary
from company_reviews.schemas.user import UserSummary

CategoryRating = Literal["excellent", "good", "fair", "poor"]
EmploymentType = Literal["full-time", "part-time", "contract", "internship", "freelance"]
ExperienceLength = Literal[
    "less-than-1-year",
    "1-2-years",
    "3-5-years",
    "5-10-years",
    "more-than-10-years",
]
ReviewSort = Literal["newest", "oldest", "rating-desc", "rating-asc", "helpful"]


def _check_half_step(value: float) -> float:
    if (value * 2) != int(value * 2):
        raise ValueError("Rating must be a whole number or half-number between 1 and 5")
    return value


class ReviewFields(BaseModel):
    """Author-owned content fields shared by create and update payloads."""

    rating: float = Field(..., ge=1, le=5, description="1 to 5 in half-point steps")
    title: str = Field(..., min_length=1, max_length=100)
    comment: str = Field(..., min_length=1, max_length=1000)
    pros: str | None = Field(None, max_length=500)
    cons: str | None = Field(None, max_length=500)
    work_environment: CategoryRating | None = None
    work_life_balance: CategoryRating | None = None
    salary: CategoryRating | None = None
    is_recommended: bool
    position: str | None = Field(None, max_length=100)
    employment_type: EmploymentType | None = None
    experience_length: ExperienceLength | None = None

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    @field_validator("rating")
    @classmethod
    def validate_rating_step(cls, v: float) -> float:
        return _check_half_step(v)


class ReviewCreate(ReviewFields):
    """Schema for creating a review of a company."""

    company_id: int = Field(..., description="Company being reviewed")


class ReviewUpdate(BaseModel):
    """Partial update of a review's content fields by its author."""

    rating: float | None = Field(None, ge=1, le=5)
    title: str | None = Field(None, min_length=1, max_length=100)
    comment: str | None = Field(None, min_length=1, max_length=1000)
    pros: str | None = Field(None, max_length=500)
    cons: str | None = Field(None, max_length=500)
    work_environment: CategoryRating | None = None
    work_life_balance: CategoryRating | None = None
    salary: CategoryRating | None = None
    is_recommended: bool | None = None
    position: str | None = Field(None, max_length=100)
    employment_type: EmploymentType | None = None
    experience_length: ExperienceLength | None = None

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    @field_validator("rating")
    @classmethod
    def validate_rating_step(cls, v: float | None) -> float | None:
        if v is None:
            return v
        return _check_half_step(v)

    @model_validator(mode="after")
    def _reject_null_required(self) -> "ReviewUpdate":
        for name in ("rating", "title", "comment", "is_recommended"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class ReviewResponse(BaseModel):
    """Schema for review information returned by the API."""

    id: int
    user_id: int
    company_id: int
    author: UserSummary | None = None
    company: CompanySummary | None = None
    rating: float
    title: str
    comment: str
    pros: str | None
    cons: str | None
    work_environment: str | None
    work_life_balance: str | None
    salary: str | None
    is_recommended: bool
    position: str | None
    employment_type: str | None
    experience_length: str | None
    is_verified: bool
    helpful_votes: int
    unhelpful_votes: int
    total_votes: int
    helpfulness_ratio: float
    user_vote: Literal["helpful", "unhelpful"] | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReviewPage(BaseModel):
    """One page of reviews plus pagination metadata."""

    data: list[ReviewResponse]
    pagination: Pagination


class ReviewStatsResponse(BaseModel):
    """Display statistics for a company's reviews."""

    average_rating: float
    total_reviews: int
    rating_distribution: dict[int, int]
    recommendation_rate: int
