"""CRUD-style helpers for managing companies."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from company_reviews.models import Company
from company_reviews.schemas.company import CompanyCreate
from company_reviews.services.errors import NotFoundError

__all__ = [
    "create_company",
    "get_company",
    "list_companies",
]


def list_companies(
    db: Session,
    search: str | None = None,
    industry: str | None = None,
) -> Sequence[Company]:
    """Return companies sorted by name, optionally filtered.

    ``search`` matches name or description case-insensitively; ``industry``
    must match exactly (ignoring case).
    """
    query = db.query(Company)
    if search:
        pattern = f"%{search.strip().lower()}%"
        query = query.filter(
            or_(
                func.lower(Company.name).like(pattern),
                func.lower(Company.description).like(pattern),
            )
        )
    if industry:
        query = query.filter(func.lower(Company.industry) == industry.strip().lower())
    return query.order_by(Company.name).all()


def get_company(db: Session, company_id: int) -> Company:
    """Return a single company by primary key or raise ``NotFoundError``."""
    company = db.get(Company, company_id)
    if company is None:
        raise NotFoundError("Company not found")
    return company


def create_company(db: Session, data: CompanyCreate) -> Company:
    """Persist a new company with zeroed rating aggregates."""
    company = Company(**data.model_dump(), average_rating=0.0, review_count=0)
    db.add(company)
    db.commit()
    db.refresh(company)
    return company
