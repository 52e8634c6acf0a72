"""initial schema

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2026-10-18 10:12:41.318204

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create company, user_account, review and review_vote tables."""
    op.create_table(
        "company",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("industry", sa.String(length=200), nullable=False),
        sa.Column("location", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("website", sa.String(length=500), nullable=True),
        sa.Column("founded", sa.String(length=50), nullable=True),
        sa.Column("employees", sa.String(length=50), nullable=True),
        sa.Column("revenue", sa.String(length=50), nullable=True),
        sa.Column("average_rating", sa.Float(), nullable=False),
        sa.Column("review_count", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            "average_rating >= 0 AND average_rating <= 5",
            name="ck_company_average_rating",
        ),
        sa.CheckConstraint("review_count >= 0", name="ck_company_review_count"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_company_name", "company", ["name"])

    op.create_table(
        "user_account",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("password_hash", sa.String(length=128), nullable=False),
        sa.Column("first_name", sa.String(length=50), nullable=False),
        sa.Column("last_name", sa.String(length=50), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("is_email_verified", sa.Boolean(), nullable=False),
        sa.Column("avatar", sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "role IN ('user', 'admin', 'moderator')",
            name="ck_user_account_role",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "review",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        sa.Column("pros", sa.Text(), nullable=True),
        sa.Column("cons", sa.Text(), nullable=True),
        sa.Column("work_environment", sa.String(length=20), nullable=True),
        sa.Column("work_life_balance", sa.String(length=20), nullable=True),
        sa.Column("salary", sa.String(length=20), nullable=True),
        sa.Column("is_recommended", sa.Boolean(), nullable=False),
        sa.Column("position", sa.String(length=100), nullable=True),
        sa.Column("employment_type", sa.String(length=20), nullable=True),
        sa.Column("experience_length", sa.String(length=30), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False),
        sa.Column("helpful_votes", sa.Integer(), nullable=False),
        sa.Column("unhelpful_votes", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("rating >= 1 AND rating <= 5", name="ck_review_rating"),
        sa.CheckConstraint("helpful_votes >= 0", name="ck_review_helpful_votes"),
        sa.CheckConstraint("unhelpful_votes >= 0", name="ck_review_unhelpful_votes"),
        sa.ForeignKeyConstraint(["company_id"], ["company.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["user_account.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "company_id", name="uq_review_user_company"),
    )
    op.create_index("ix_review_company_id", "review", ["company_id"])

    op.create_table(
        "review_vote",
        sa.Column("review_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("vote", sa.String(length=10), nullable=False),
        sa.CheckConstraint("vote IN ('helpful', 'unhelpful')", name="ck_review_vote_value"),
        sa.ForeignKeyConstraint(["review_id"], ["review.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["user_account.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("review_id", "user_id"),
    )
    op.create_index("ix_review_vote_user_id", "review_vote", ["user_id"])


def downgrade() -> None:
    """Drop all tables created by this revision."""
    op.drop_index("ix_review_vote_user_id", table_name="review_vote")
    op.drop_table("review_vote")
    op.drop_index("ix_review_company_id", table_name="review")
    op.drop_table("review")
    op.drop_table("user_account")
    op.drop_index("ix_company_name", table_name="company")
    op.drop_table("company")
