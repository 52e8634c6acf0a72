# src/company_reviews/api/v1/endpoints/votes.py
"""Helpfulness vote endpoints for the company review API."""

from fastapi import APIRouter, status

from company_reviews.api.v1.dependencies import CurrentUserDep, SessionDep, http_error
from company_reviews.schemas.vote import MyVoteResponse, VoteCreate, VoteResponse
from company_reviews.services import review_service, vote_ledger
from company_reviews.services.errors import ReviewServiceError

router = APIRouter(prefix="/reviews", tags=["votes"])


@router.post("/{review_id}/vote", response_model=VoteResponse, status_code=status.HTTP_200_OK)
async def cast_vote(
    review_id: int,
    vote_data: VoteCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> VoteResponse:
    """Vote a review helpful or unhelpful; repeating the same vote removes it."""
    try:
        result = vote_ledger.cast_vote(db, review_id, current_user, vote_data.vote)
    except ReviewServiceError as err:
        raise http_error(err) from err
    return VoteResponse(
        helpful_votes=result.helpful_votes,
        unhelpful_votes=result.unhelpful_votes,
        user_vote=result.user_vote,
    )


@router.get("/{review_id}/my-vote", response_model=MyVoteResponse)
async def get_my_vote(
    review_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MyVoteResponse:
    """Get current user's vote on a specific review."""
    try:
        review = review_service.get_review(db, review_id)
    except ReviewServiceError as err:
        raise http_error(err) from err
    return MyVoteResponse(user_vote=vote_ledger.get_user_vote(db, review.id, current_user.id))
