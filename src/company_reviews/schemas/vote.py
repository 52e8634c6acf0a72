"""Vote-related Pydantic schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class VoteCreate(BaseModel):
    """Schema for casting a helpfulness vote on a review."""

    vote: Literal["helpful", "unhelpful"] = Field(
        ...,
        description="'helpful' or 'unhelpful'; repeating the same vote removes it",
    )


class VoteResponse(BaseModel):
    """Counters after a vote together with the caller's current vote."""

    helpful_votes: int
    unhelpful_votes: int
    user_vote: Literal["helpful", "unhelpful"] | None


class MyVoteResponse(BaseModel):
    """The caller's vote on a review, if any."""

    user_vote: Literal["helpful", "unhelpful"] | None
