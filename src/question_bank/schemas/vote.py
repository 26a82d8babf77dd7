"""Vote-related Pydantic schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class VoteCreate(BaseModel):
    """Schema for submitting a vote."""

    question_id: int
    vote_type: Literal["upvote", "downvote"] = Field(..., description="upvote or downvote")


class ScoreResponse(BaseModel):
    """Current score for a question."""

    question_id: int
    total_score: int
    upvotes: int
    downvotes: int

    model_config = ConfigDict(from_attributes=True)


class VoterChoiceResponse(BaseModel):
    """The caller's current vote on a question, if any."""

    question_id: int
    vote_type: Literal["upvote", "downvote"] | None
