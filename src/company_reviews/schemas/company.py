"""Company-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CompanyCreate(BaseModel):
    """Schema for creating a new company.

    Rating aggregates are derived from reviews and cannot be supplied here.
    """

    name: str = Field(..., min_length=1, max_length=200)
    industry: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    website: str | None = Field(None, max_length=500)
    founded: str | None = Field(None, max_length=50)
    employees: str | None = Field(None, max_length=50)
    revenue: str | None = Field(None, max_length=50)

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")


class CompanySummary(BaseModel):
    """Compact company reference embedded in review payloads."""

    id: int
    name: str
    industry: str
    location: str

    model_config = ConfigDict(from_attributes=True)


class CompanyResponse(BaseModel):
    """Schema for company information returned by the API."""

    id: int
    name: str
    industry: str
    location: str
    description: str
    website: str | None
    founded: str | None
    employees: str | None
    revenue: str | None
    average_rating: float
    review_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
