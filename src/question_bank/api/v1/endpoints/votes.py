"""Vote-related endpoints for the Question Bank API."""

from __future__ import annotations

from fastapi import APIRouter, status

from question_bank.schemas.vote import ScoreResponse, VoteCreate, VoterChoiceResponse
from question_bank.services.tally import TallyError, to_score_response

from ..dependencies import CurrentVoterDep, TallyServiceDep
from ..errors import tally_http_error

router = APIRouter(prefix="/votes", tags=["votes"])


@router.post("/", response_model=ScoreResponse, status_code=status.HTTP_201_CREATED)
def cast_vote(
    vote_data: VoteCreate,
    voter_id: CurrentVoterDep,
    tally: TallyServiceDep,
) -> ScoreResponse:
    """Cast or change the caller's vote on a question and return its score."""
    try:
        snapshot = tally.submit_vote(vote_data.question_id, voter_id, vote_data.vote_type)
    except TallyError as err:
        raise tally_http_error(err) from err
    return to_score_response(snapshot)


@router.get("/{question_id}/my-vote", response_model=VoterChoiceResponse)
def get_my_vote(
    question_id: int,
    voter_id: CurrentVoterDep,
    tally: TallyServiceDep,
) -> VoterChoiceResponse:
    """Get the caller's current vote on a question."""
    choice = tally.get_voter_choice(question_id, voter_id)
    return VoterChoiceResponse(
        question_id=question_id,
        vote_type=choice.value if choice is not None else None,
    )


@router.get("/{question_id}/score", response_model=ScoreResponse)
def get_score(
    question_id: int,
    _voter_id: CurrentVoterDep,
    tally: TallyServiceDep,
) -> ScoreResponse:
    """Return the score of a question; unvoted questions report the base score."""
    return to_score_response(tally.get_score(question_id))
