"""SQLAlchemy models for questions and their answer options."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from question_bank.db.session import Base
from question_bank.db.time import utcnow

QUESTION_TYPES = ("mcq", "true_false")
DIFFICULTY_LEVELS = ("easy", "medium", "hard")


class Question(Base):
    """A question in the bank.

    Questions are never removed; deleting one clears ``is_active`` so that
    votes and scores keep pointing at a real row.
    """

    __tablename__ = "question"
    __table_args__ = (
        CheckConstraint(
            "question_type IN ('mcq', 'true_false')",
            name="ck_question_type",
        ),
        CheckConstraint(
            "difficulty_level IS NULL OR difficulty_level IN ('easy', 'medium', 'hard')",
            name="ck_question_difficulty",
        ),
        Index("ix_question_category_id", "category_id"),
        Index("ix_question_subcategory_id", "subcategory_id"),
    )

    question_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    question_writer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employee.employee_id"),
        nullable=False,
    )
    category_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("category.category_id", ondelete="SET NULL"),
        nullable=True,
    )
    subcategory_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("subcategory.subcategory_id", ondelete="SET NULL"),
        nullable=True,
    )
    question_type: Mapped[str] = mapped_column(Text, nullable=False, default="mcq")
    question_instructions: Mapped[str | None] = mapped_column(Text, nullable=True)
    difficulty_level: Mapped[str | None] = mapped_column(Text, nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
    )

    options: Mapped[list[QuestionOption]] = relationship(
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="QuestionOption.option_order",
    )


class QuestionOption(Base):
    """Answer option attached to a multiple-choice question."""

    __tablename__ = "question_option"
    __table_args__ = (Index("ix_question_option_question_id", "question_id"),)

    option_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("question.question_id", ondelete="CASCADE"),
        nullable=False,
    )
    option_text: Mapped[str] = mapped_column(Text, nullable=False)
    is_correct: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    option_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    question: Mapped[Question] = relationship(back_populates="options")
