"""Tests for the helpfulness vote ledger."""

from unittest.mock import patch

import pytest

from company_reviews.models import ReviewVote
from company_reviews.services.errors import (
    ConflictError,
    ForbiddenError,
    InvalidVoteError,
    NotFoundError,
)
from company_reviews.services.vote_ledger import (
    cast_vote,
    get_user_vote,
    user_votes_for,
)


def test_vote_toggle_sequence(db_session, test_review, other_user) -> None:
    """helpful -> helpful again -> unhelpful walks the counters as expected."""
    first = cast_vote(db_session, test_review.id, other_user, "helpful")
    assert (first.helpful_votes, first.unhelpful_votes, first.user_vote) == (1, 0, "helpful")

    second = cast_vote(db_session, test_review.id, other_user, "helpful")
    assert (second.helpful_votes, second.unhelpful_votes, second.user_vote) == (0, 0, None)
    assert get_user_vote(db_session, test_review.id, other_user.id) is None

    third = cast_vote(db_session, test_review.id, other_user, "unhelpful")
    assert (third.helpful_votes, third.unhelpful_votes, third.user_vote) == (0, 1, "unhelpful")


def test_switching_vote_moves_the_count(db_session, test_review, other_user) -> None:
    cast_vote(db_session, test_review.id, other_user, "helpful")
    result = cast_vote(db_session, test_review.id, other_user, "unhelpful")

    assert result.helpful_votes == 0
    assert result.unhelpful_votes == 1
    assert result.user_vote == "unhelpful"
    assert get_user_vote(db_session, test_review.id, other_user.id) == "unhelpful"


def test_same_vote_twice_restores_state(db_session, test_review, other_user) -> None:
    before = (test_review.helpful_votes, test_review.unhelpful_votes)

    cast_vote(db_session, test_review.id, other_user, "unhelpful")
    cast_vote(db_session, test_review.id, other_user, "unhelpful")

    db_session.refresh(test_review)
    assert (test_review.helpful_votes, test_review.unhelpful_votes) == before
    assert db_session.get(ReviewVote, (test_review.id, other_user.id)) is None


def test_counters_match_ledger(db_session, test_review, make_user) -> None:
    voters = [make_user() for _ in range(4)]
    for voter in voters[:3]:
        cast_vote(db_session, test_review.id, voter, "helpful")
    cast_vote(db_session, test_review.id, voters[3], "unhelpful")
    cast_vote(db_session, test_review.id, voters[0], "unhelpful")

    entries = db_session.query(ReviewVote).filter(ReviewVote.review_id == test_review.id).all()
    db_session.refresh(test_review)
    assert test_review.helpful_votes == sum(1 for e in entries if e.vote == "helpful") == 2
    assert test_review.unhelpful_votes == sum(1 for e in entries if e.vote == "unhelpful") == 2


def test_self_vote_is_forbidden(db_session, test_review, test_user) -> None:
    with pytest.raises(ForbiddenError):
        cast_vote(db_session, test_review.id, test_user, "helpful")

    db_session.refresh(test_review)
    assert test_review.helpful_votes == 0
    assert get_user_vote(db_session, test_review.id, test_user.id) is None


def test_invalid_vote_value(db_session, test_review, other_user) -> None:
    with pytest.raises(InvalidVoteError):
        cast_vote(db_session, test_review.id, other_user, "love-it")


def test_vote_on_missing_review(db_session, other_user) -> None:
    with pytest.raises(NotFoundError):
        cast_vote(db_session, 9999, other_user, "helpful")


def test_decrement_is_clamped_at_zero(db_session, test_review, other_user) -> None:
    """A ledger row whose counter already drifted to zero never goes negative."""
    db_session.add(ReviewVote(review_id=test_review.id, user_id=other_user.id, vote="helpful"))
    db_session.commit()
    assert test_review.helpful_votes == 0

    result = cast_vote(db_session, test_review.id, other_user, "helpful")

    assert result.helpful_votes == 0
    assert result.user_vote is None


def test_votes_do_not_touch_company_aggregates(db_session, test_review, other_user, company) -> None:
    db_session.refresh(company)
    before = (company.average_rating, company.review_count)

    cast_vote(db_session, test_review.id, other_user, "helpful")

    db_session.refresh(company)
    assert (company.average_rating, company.review_count) == before


def test_user_votes_for_maps_only_voted_reviews(db_session, test_review, other_user) -> None:
    cast_vote(db_session, test_review.id, other_user, "unhelpful")

    assert user_votes_for(db_session, [test_review.id, 12345], other_user.id) == {
        test_review.id: "unhelpful"
    }
    assert user_votes_for(db_session, [], other_user.id) == {}


def test_concurrent_first_vote_conflicts(db_session, test_review, other_user) -> None:
    """A ledger row inserted after the lookup surfaces as a conflict, not a crash."""
    entry = ReviewVote(review_id=test_review.id, user_id=other_user.id, vote="helpful")
    db_session.add(entry)
    db_session.commit()
    db_session.expunge(entry)

    with patch("company_reviews.services.vote_ledger._find_vote", return_value=None):
        with pytest.raises(ConflictError):
            cast_vote(db_session, test_review.id, other_user, "helpful")

    db_session.refresh(test_review)
    assert test_review.helpful_votes == 0
    assert get_user_vote(db_session, test_review.id, other_user.id) == "helpful"
