# src/company_reviews/services/vote_ledger.py
"""Helpfulness vote ledger for reviews.

Each review keeps one ``ReviewVote`` row per voter and two running counters.
Casting the same vote twice removes it; casting the opposite vote switches it.
Counter decrements are clamped at zero even though ledger and counters are
updated in lockstep.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from company_reviews.models import Review, ReviewVote, User
from company_reviews.models.vote import VOTE_HELPFUL, VOTE_VALUES
from company_reviews.services.errors import (
    ConflictError,
    ForbiddenError,
    InvalidVoteError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoteResult:
    """Counters after a vote and the voter's resulting vote (None if removed)."""

    helpful_votes: int
    unhelpful_votes: int
    user_vote: str | None


def _increment(review: Review, vote: str) -> None:
    if vote == VOTE_HELPFUL:
        review.helpful_votes += 1
    else:
        review.unhelpful_votes += 1


def _decrement(review: Review, vote: str) -> None:
    if vote == VOTE_HELPFUL:
        review.helpful_votes = max(0, review.helpful_votes - 1)
    else:
        review.unhelpful_votes = max(0, review.unhelpful_votes - 1)


def _find_vote(db: Session, review_id: int, user_id: int) -> ReviewVote | None:
    return db.get(ReviewVote, (review_id, user_id))


def apply_vote(
    review: Review,
    existing: ReviewVote | None,
    vote: str,
) -> tuple[str, str | None]:
    """Adjust ``review`` counters for a vote against the voter's prior entry.

    Returns:
        ``(action, user_vote)`` where action is one of ``"added"``,
        ``"removed"`` or ``"switched"``; the caller persists the ledger row
        accordingly.
    """
    if existing is None:
        _increment(review, vote)
        return "added", vote

    if existing.vote == vote:
        _decrement(review, vote)
        return "removed", None

    _increment(review, vote)
    _decrement(review, existing.vote)
    return "switched", vote


def cast_vote(db: Session, review_id: int, voter: User, vote: str) -> VoteResult:
    """Record, toggle off or switch ``voter``'s vote on a review.

    Args:
        db: Database session
        review_id: Review being voted on
        voter: Authenticated user casting the vote
        vote: ``"helpful"`` or ``"unhelpful"``

    Returns:
        Updated counters and the voter's current vote.

    Raises:
        InvalidVoteError: If ``vote`` is not a known value.
        NotFoundError: If the review does not exist.
        ForbiddenError: If the voter wrote the review.
        ConflictError: If a concurrent request recorded a vote by the same
            voter first.
    """
    if vote not in VOTE_VALUES:
        raise InvalidVoteError('Vote must be either "helpful" or "unhelpful"')

    review = db.get(Review, review_id)
    if review is None:
        raise NotFoundError("Review not found")

    if review.user_id == voter.id:
        raise ForbiddenError("You cannot vote on your own review")

    existing = _find_vote(db, review_id, voter.id)
    action, user_vote = apply_vote(review, existing, vote)

    if action == "added":
        db.add(ReviewVote(review_id=review_id, user_id=voter.id, vote=vote))
    elif action == "removed":
        db.delete(existing)
    else:
        existing.vote = vote

    try:
        db.commit()
    except IntegrityError as err:
        # Another request inserted this voter's ledger row first.
        db.rollback()
        raise ConflictError("Your vote on this review was changed by another request") from err
    db.refresh(review)
    logger.debug("Vote on review %s by user %s: %s (%s)", review_id, voter.id, vote, action)

    return VoteResult(
        helpful_votes=review.helpful_votes,
        unhelpful_votes=review.unhelpful_votes,
        user_vote=user_vote,
    )


def get_user_vote(db: Session, review_id: int, user_id: int) -> str | None:
    """Return the user's vote on a review, or None if they have not voted."""
    entry = _find_vote(db, review_id, user_id)
    return entry.vote if entry else None


def user_votes_for(db: Session, review_ids: Iterable[int], user_id: int) -> dict[int, str]:
    """Map review id to the user's vote for every listed review they voted on."""
    ids = list(review_ids)
    if not ids:
        return {}
    rows = db.query(ReviewVote).filter(
        ReviewVote.user_id == user_id,
        ReviewVote.review_id.in_(ids),
    ).all()
    return {row.review_id: row.vote for row in rows}

