"""Question endpoints for the Question Bank API."""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, Query, status

from question_bank.core.settings import settings
from question_bank.models import Question
from question_bank.schemas.question import (
    DifficultyLevel,
    QuestionCreate,
    QuestionDetailResponse,
    QuestionResponse,
    QuestionType,
    QuestionUpdate,
)
from question_bank.schemas.vote import ScoreResponse
from question_bank.services import catalog
from question_bank.services.catalog import CatalogError
from question_bank.services.tally import to_score_response

from ..dependencies import CurrentVoterDep, SessionDep, TallyServiceDep
from ..errors import catalog_http_error

router = APIRouter(prefix="/questions", tags=["questions"])


def _detail(question: Question) -> QuestionDetailResponse:
    detail = QuestionDetailResponse.model_validate(question)
    if question.question_type != "mcq":
        detail.options = []
    return detail


@router.get("/", response_model=list[QuestionResponse])
def list_questions(
    _voter_id: CurrentVoterDep,
    db: SessionDep,
    category_id: int | None = Query(None, description="Filter by category"),
    subcategory_id: int | None = Query(None, description="Filter by subcategory"),
    difficulty: DifficultyLevel | None = Query(None, description="Filter by difficulty"),
    type: QuestionType | None = Query(None, description="Filter by question type"),  # noqa: A002
    limit: int = Query(100, ge=1, le=settings.question_page_size_max),
    offset: int = Query(0, ge=0),
) -> Sequence[Question]:
    """List active questions with optional filters."""
    return catalog.list_questions(
        db,
        category_id=category_id,
        subcategory_id=subcategory_id,
        difficulty=difficulty,
        question_type=type,
        limit=limit,
        offset=offset,
    )


@router.post(
    "/",
    response_model=QuestionDetailResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_question(
    question_data: QuestionCreate,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> QuestionDetailResponse:
    """Create a question and its options."""
    try:
        question = catalog.create_question(db, question_data)
    except CatalogError as err:
        raise catalog_http_error(err) from err
    return _detail(question)


@router.get("/{question_id}", response_model=QuestionDetailResponse)
def get_question(
    question_id: int,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> QuestionDetailResponse:
    """Return an active question; MCQ questions include their options."""
    try:
        question = catalog.get_question(db, question_id)
    except CatalogError as err:
        raise catalog_http_error(err) from err
    return _detail(question)


@router.put("/{question_id}", response_model=QuestionDetailResponse)
def update_question(
    question_id: int,
    question_data: QuestionUpdate,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> QuestionDetailResponse:
    """Update a question; a supplied ``options`` list replaces the old one."""
    try:
        question = catalog.update_question(db, question_id, question_data)
    except CatalogError as err:
        raise catalog_http_error(err) from err
    return _detail(question)


@router.delete("/{question_id}")
def delete_question(
    question_id: int,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
) -> dict[str, str]:
    """Soft delete a question."""
    try:
        catalog.deactivate_question(db, question_id)
    except CatalogError as err:
        raise catalog_http_error(err) from err
    return {"status": "success", "message": "Question deleted successfully"}


@router.get("/{question_id}/score", response_model=ScoreResponse)
def get_question_score(
    question_id: int,
    _voter_id: CurrentVoterDep,
    db: SessionDep,
    tally: TallyServiceDep,
) -> ScoreResponse:
    """Return the running score of a question."""
    try:
        catalog.get_question(db, question_id)
    except CatalogError as err:
        raise catalog_http_error(err) from err
    return to_score_response(tally.get_score(question_id))
