# src/company_reviews/api/v1/endpoints/companies.py
"""Company-related endpoints for the company review API."""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, Query, status

from company_reviews.api.v1.dependencies import AdminUserDep, SessionDep, http_error
from company_reviews.models import Company
from company_reviews.schemas.company import CompanyCreate, CompanyResponse
from company_reviews.services import company_service
from company_reviews.services.errors import ReviewServiceError

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get("/", response_model=list[CompanyResponse])
async def list_companies(
    db: SessionDep,
    search: str | None = Query(None, description="Match against name or description"),
    industry: str | None = Query(None, description="Filter by industry"),
) -> Sequence[Company]:
    """List companies sorted by name."""
    return company_service.list_companies(db, search=search, industry=industry)


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(company_id: int, db: SessionDep) -> Company:
    """Get a specific company by ID."""
    try:
        return company_service.get_company(db, company_id)
    except ReviewServiceError as err:
        raise http_error(err) from err


@router.post("/",
          response_model=CompanyResponse,
          status_code=status.HTTP_201_CREATED)
async def create_company(
    company_data: CompanyCreate,
    _admin: AdminUserDep,
    db: SessionDep,
) -> Company:
    """Create a new company (admin only)."""
    return company_service.create_company(db, company_data)
