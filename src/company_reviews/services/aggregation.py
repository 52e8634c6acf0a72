# src/company_reviews/services/aggregation.py
"""Company rating aggregation.

A company's ``average_rating`` and ``review_count`` are always recomputed from
the review table, never adjusted incrementally. The recompute is one aggregate
read followed by one ``UPDATE`` statement. Two recomputes racing for the same
company are last-writer-wins; nothing here serialises them.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from company_reviews.models import Company, Review

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 1) -> float:
    """Round ``value`` to ``digits`` decimals with halves rounded up.

    Python's ``round`` uses banker's rounding (``round(4.25, 1) == 4.2``);
    ratings round 4.25 to 4.3.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def compute_company_rating(db: Session, company_id: int) -> tuple[float, int]:
    """Return ``(average_rating, review_count)`` for a company's reviews.

    The average is rounded half-up to one decimal; both values are 0 when the
    company has no reviews.
    """
    average, count = (
        db.query(func.avg(Review.rating), func.count(Review.id))
        .filter(Review.company_id == company_id)
        .one()
    )
    count = int(count or 0)
    if count == 0 or average is None:
        return 0.0, 0
    return round_half_up(float(average), 1), count


def recompute_company_rating(db: Session, company_id: int) -> tuple[float, int]:
    """Recompute and persist a company's aggregate rating fields.

    Args:
        db: Database session
        company_id: Company whose aggregates should be refreshed

    Returns:
        The ``(average_rating, review_count)`` pair that was written.
    """
    # Make sure pending review writes are visible to the aggregate query.
    db.flush()
    average, count = compute_company_rating(db, company_id)
    db.execute(
        update(Company)
        .where(Company.id == company_id)
        .values(average_rating=average, review_count=count)
    )
    db.commit()
    logger.debug(
        "Company %s aggregates recomputed: average=%.1f count=%d",
        company_id,
        average,
        count,
    )
    return average, count


def refresh_company_rating(db: Session, company_id: int) -> tuple[float, int] | None:
    """Run :func:`recompute_company_rating` after a committed review write.

    A failed recompute is logged and dropped: the review write has already
    been committed and the aggregates stay stale until the next review write
    for the same company. There is no retry or reconciliation job.
    """
    try:
        return recompute_company_rating(db, company_id)
    except SQLAlchemyError:
        logger.exception("Failed to recompute rating aggregates for company %s", company_id)
        db.rollback()
        return None
