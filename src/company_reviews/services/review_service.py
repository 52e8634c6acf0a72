"""Service-level helpers for creating, editing and reading reviews."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from sqlalchemy import asc, desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from company_reviews.models import Company, Review, User
from company_reviews.schemas.review import ReviewCreate, ReviewUpdate
from company_reviews.services.aggregation import refresh_company_rating, round_half_up
from company_reviews.services.errors import ConflictError, ForbiddenError, NotFoundError

__all__ = [
    "Page",
    "ReviewStats",
    "create_review",
    "delete_review",
    "get_review",
    "get_review_stats",
    "list_company_reviews",
    "list_user_reviews",
    "update_review",
]

logger = logging.getLogger(__name__)

RATING_BUCKETS = (1, 2, 3, 4, 5)

_SORT_ORDERS = {
    "newest": (desc(Review.created_at), desc(Review.id)),
    "oldest": (asc(Review.created_at), asc(Review.id)),
    "rating-desc": (desc(Review.rating), desc(Review.created_at), desc(Review.id)),
    "rating-asc": (asc(Review.rating), desc(Review.created_at), desc(Review.id)),
    "helpful": (desc(Review.helpful_votes), desc(Review.created_at), desc(Review.id)),
}

DUPLICATE_REVIEW_MESSAGE = (
    "You have already reviewed this company. You can edit your existing review instead."
)


@dataclass(frozen=True)
class Page:
    """A slice of reviews with the numbers needed to paginate."""

    items: list[Review]
    current: int
    total_pages: int
    limit: int
    total_reviews: int


@dataclass(frozen=True)
class ReviewStats:
    """Display statistics for one company's reviews."""

    average_rating: float = 0.0
    total_reviews: int = 0
    rating_distribution: dict[int, int] = field(
        default_factory=lambda: {bucket: 0 for bucket in RATING_BUCKETS}
    )
    recommendation_rate: int = 0


def _get_company_or_raise(db: Session, company_id: int) -> Company:
    company = db.get(Company, company_id)
    if company is None:
        raise NotFoundError("Company not found")
    return company


def get_review(db: Session, review_id: int) -> Review:
    """Return a review by id or raise ``NotFoundError``."""
    review = db.get(Review, review_id)
    if review is None:
        raise NotFoundError("Review not found")
    return review


def create_review(db: Session, author: User, data: ReviewCreate) -> Review:
    """Create ``author``'s review of a company and refresh the company aggregates.

    Args:
        db: Database session
        author: Authenticated user writing the review
        data: Validated review payload

    Returns:
        The persisted review.

    Raises:
        NotFoundError: If the company does not exist.
        ConflictError: If the author already reviewed this company.
    """
    _get_company_or_raise(db, data.company_id)

    existing = db.query(Review.id).filter(
        Review.user_id == author.id,
        Review.company_id == data.company_id,
    ).first()
    if existing is not None:
        raise ConflictError(DUPLICATE_REVIEW_MESSAGE)

    review = Review(
        user_id=author.id,
        is_verified=False,
        helpful_votes=0,
        unhelpful_votes=0,
        **data.model_dump(),
    )
    db.add(review)
    try:
        db.commit()
    except IntegrityError as err:
        # A concurrent request inserted the same (user, company) pair.
        db.rollback()
        raise ConflictError("You have already reviewed this company") from err

    logger.info(
        "Review %s created by user %s for company %s",
        review.id,
        author.id,
        data.company_id,
    )
    refresh_company_rating(db, data.company_id)
    db.refresh(review)
    return review


def update_review(db: Session, review_id: int, actor: User, data: ReviewUpdate) -> Review:
    """Apply a partial content update to a review written by ``actor``.

    The company aggregates are recomputed afterwards.

    Raises:
        NotFoundError: If the review does not exist.
        ForbiddenError: If ``actor`` is not the author.
    """
    review = get_review(db, review_id)
    if review.user_id != actor.id:
        raise ForbiddenError("You can only edit your own reviews")

    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(review, key, value)

    db.commit()
    refresh_company_rating(db, review.company_id)
    db.refresh(review)
    return review


def delete_review(db: Session, review_id: int, actor: User) -> None:
    """Delete a review as its author or an admin and refresh the company aggregates.

    Raises:
        NotFoundError: If the review does not exist.
        ForbiddenError: If ``actor`` is neither the author nor an admin.
    """
    review = get_review(db, review_id)
    if review.user_id != actor.id and not actor.is_admin:
        raise ForbiddenError("You can only delete your own reviews")

    company_id = review.company_id
    db.delete(review)
    db.commit()
    logger.info("Review %s deleted by user %s", review_id, actor.id)
    refresh_company_rating(db, company_id)


def _paginate(query, page: int, limit: int) -> Page:
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return Page(
        items=items,
        current=page,
        total_pages=math.ceil(total / limit) if limit else 0,
        limit=limit,
        total_reviews=total,
    )


def list_company_reviews(
    db: Session,
    company_id: int,
    *,
    page: int = 1,
    limit: int = 10,
    sort: str = "newest",
) -> Page:
    """Return one page of a company's reviews in the requested order.

    Unknown sort keys fall back to newest first.
    """
    _get_company_or_raise(db, company_id)
    order = _SORT_ORDERS.get(sort, _SORT_ORDERS["newest"])
    query = db.query(Review).filter(Review.company_id == company_id).order_by(*order)
    return _paginate(query, page, limit)


def list_user_reviews(db: Session, user_id: int, *, page: int = 1, limit: int = 10) -> Page:
    """Return one page of a user's reviews, newest first."""
    query = db.query(Review).filter(Review.user_id == user_id).order_by(
        *_SORT_ORDERS["newest"]
    )
    return _paginate(query, page, limit)


def rating_bucket(rating: float) -> int:
    """Map a rating onto the 1–5 histogram; half points round up."""
    bucket = int(round_half_up(rating, 0))
    return min(max(bucket, RATING_BUCKETS[0]), RATING_BUCKETS[-1])


def get_review_stats(db: Session, company_id: int) -> ReviewStats:
    """Compute display statistics for a company's reviews.

    Returns:
        Average rating (one decimal), review count, a 1–5 histogram and the
        percentage of reviews that recommend the company. All zero when the
        company has no reviews.

    Raises:
        NotFoundError: If the company does not exist.
    """
    _get_company_or_raise(db, company_id)
    rows = db.query(Review.rating, Review.is_recommended).filter(
        Review.company_id == company_id
    ).all()
    if not rows:
        return ReviewStats()

    distribution = {bucket: 0 for bucket in RATING_BUCKETS}
    for rating, _ in rows:
        distribution[rating_bucket(rating)] += 1

    total = len(rows)
    mean = sum(rating for rating, _ in rows) / total
    recommended = sum(1 for _, is_recommended in rows if is_recommended)
    return ReviewStats(
        average_rating=round_half_up(mean, 1),
        total_reviews=total,
        rating_distribution=distribution,
        recommendation_rate=int(round_half_up(recommended / total * 100, 0)),
    )
