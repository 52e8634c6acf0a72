# src/company_reviews/models/review.py
"""SQLAlchemy model for company reviews."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from company_reviews.db.session import Base
from company_reviews.db.time import utcnow

CATEGORY_RATINGS = ("excellent", "good", "fair", "poor")
EMPLOYMENT_TYPES = ("full-time", "part-time", "contract", "internship", "freelance")
EXPERIENCE_LENGTHS = (
    "less-than-1-year",
    "1-2-years",
    "3-5-years",
    "5-10-years",
    "more-than-10-years",
)


class Review(Base):
    """One user's review of one company.

    Content fields belong to the author. ``helpful_votes`` and
    ``unhelpful_votes`` are maintained by the vote ledger and always match the
    ``votes`` rows.
    """

    __tablename__ = "review"
    __table_args__ = (
        # One review per user per company.
        UniqueConstraint("user_id", "company_id", name="uq_review_user_company"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_review_rating"),
        CheckConstraint("helpful_votes >= 0", name="ck_review_helpful_votes"),
        CheckConstraint("unhelpful_votes >= 0", name="ck_review_unhelpful_votes"),
        Index("ix_review_company_id", "company_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        nullable=False,
    )
    company_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("company.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Whole or half points between 1 and 5.
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False)
    pros: Mapped[str | None] = mapped_column(Text, nullable=True)
    cons: Mapped[str | None] = mapped_column(Text, nullable=True)

    work_environment: Mapped[str | None] = mapped_column(String(20), nullable=True)
    work_life_balance: Mapped[str | None] = mapped_column(String(20), nullable=True)
    salary: Mapped[str | None] = mapped_column(String(20), nullable=True)

    is_recommended: Mapped[bool] = mapped_column(Boolean, nullable=False)
    position: Mapped[str | None] = mapped_column(String(100), nullable=True)
    employment_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    experience_length: Mapped[str | None] = mapped_column(String(30), nullable=True)
    is_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    helpful_votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    unhelpful_votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    author = relationship("User", lazy="joined")
    company = relationship("Company", lazy="joined")
    votes = relationship(
        "ReviewVote",
        cascade="all, delete-orphan",
        order_by="ReviewVote.user_id",
    )

    @property
    def total_votes(self) -> int:
        return self.helpful_votes + self.unhelpful_votes

    @property
    def helpfulness_ratio(self) -> float:
        """Share of votes marking the review helpful (0 when nobody voted)."""
        total = self.total_votes
        return self.helpful_votes / total if total > 0 else 0.0
