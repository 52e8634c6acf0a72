# src/company_reviews/models/vote.py
"""Models capturing helpfulness votes on reviews."""

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from company_reviews.db.session import Base

VOTE_HELPFUL = "helpful"
VOTE_UNHELPFUL = "unhelpful"
VOTE_VALUES = (VOTE_HELPFUL, VOTE_UNHELPFUL)


class ReviewVote(Base):
    """Per-user helpfulness vote on a review.

    Together these rows form the vote ledger backing the review counters.
    """

    __tablename__ = "review_vote"
    __table_args__ = (
        CheckConstraint("vote IN ('helpful', 'unhelpful')", name="ck_review_vote_value"),
        Index("ix_review_vote_user_id", "user_id"),
    )

    review_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("review.id", ondelete="CASCADE"),
        primary_key=True,
    )

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # Composite primary key prevents duplicate votes from the same user.

    vote: Mapped[str] = mapped_column(String(10), nullable=False)
