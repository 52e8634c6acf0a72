# src/company_reviews/models/company.py
"""SQLAlchemy model for reviewed companies."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from company_reviews.db.session import Base
from company_reviews.db.time import utcnow


class Company(Base):
    """A company that users can review.

    ``average_rating`` and ``review_count`` mirror the review table and are
    written only by the aggregation updater.
    """

    __tablename__ = "company"
    __table_args__ = (
        CheckConstraint(
            "average_rating >= 0 AND average_rating <= 5",
            name="ck_company_average_rating",
        ),
        CheckConstraint("review_count >= 0", name="ck_company_review_count"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    industry: Mapped[str] = mapped_column(String(200), nullable=False)
    location: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    founded: Mapped[str | None] = mapped_column(String(50), nullable=True)
    employees: Mapped[str | None] = mapped_column(String(50), nullable=True)
    revenue: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Derived from the review table.
    average_rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
