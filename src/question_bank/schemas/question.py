"""Question-related Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .common import reject_null

QuestionType = Literal["mcq", "true_false"]
DifficultyLevel = Literal["easy", "medium", "hard"]


class OptionIn(BaseModel):
    """Answer option supplied when creating or replacing options."""

    text: str = Field(..., min_length=1)
    is_correct: bool = False
    order: int = 0


class OptionResponse(BaseModel):
    """Answer option returned by the API."""

    option_id: int
    option_text: str
    is_correct: bool
    option_order: int

    model_config = ConfigDict(from_attributes=True)


class QuestionCreate(BaseModel):
    """Schema for creating a new question."""

    question_text: str = Field(..., min_length=1, description="Question text is required")
    question_writer_id: int = Field(..., description="Employee credited as the writer")
    category_id: int | None = None
    subcategory_id: int | None = None
    question_type: QuestionType = "mcq"
    question_instructions: str | None = None
    difficulty_level: DifficultyLevel | None = None
    options: list[OptionIn] | None = Field(
        None,
        description="Answer options; only stored for mcq questions",
    )


class QuestionUpdate(BaseModel):
    """Partial update; ``options``, when present, replaces the whole option list."""

    question_text: str | None = Field(None, min_length=1)
    category_id: int | None = None
    subcategory_id: int | None = None
    question_type: QuestionType | None = None
    question_instructions: str | None = None
    difficulty_level: DifficultyLevel | None = None
    options: list[OptionIn] | None = None

    @field_validator("question_text", "question_type")
    @classmethod
    def _not_null(cls, v: object, info: ValidationInfo) -> object:
        return reject_null(v, info.field_name)


class QuestionResponse(BaseModel):
    """Schema for question information returned by list endpoints."""

    question_id: int
    question_text: str
    question_writer_id: int
    category_id: int | None
    subcategory_id: int | None
    question_type: str
    question_instructions: str | None
    difficulty_level: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class QuestionDetailResponse(QuestionResponse):
    """Single question including its answer options."""

    options: list[OptionResponse] = Field(default_factory=list)
