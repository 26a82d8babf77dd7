"""Models capturing votes on questions and their running score."""
from __future__ import annotations

import enum

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Text
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column

from question_bank.core.settings import settings
from question_bank.db.session import Base


class VoteType(str, enum.Enum):
    """Direction of a single voter's opinion on a question."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"

    @property
    def counter(self) -> str:
        """Name of the ``QuestionScore`` column this direction feeds."""
        return "upvotes" if self is VoteType.UPVOTE else "downvotes"


class QuestionVote(Base):
    """Per-voter vote on a question.

    Written only by the tally service, together with ``QuestionScore``.
    """

    __tablename__ = "question_vote"
    __table_args__ = (
        CheckConstraint("vote_type IN ('upvote', 'downvote')", name="ck_question_vote_type"),
        Index("ix_question_vote_question_id", "question_id"),
    )

    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("question.question_id", ondelete="CASCADE"),
        primary_key=True,
    )
    voter_id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Composite primary key prevents duplicate votes from the same voter.

    vote_type: Mapped[str] = mapped_column(Text, nullable=False)


class QuestionScore(Base):
    """Cached vote counters for a question.

    ``upvotes`` and ``downvotes`` always equal the matching ``QuestionVote``
    row counts; ``total_score`` is derived and never stored.
    """

    __tablename__ = "question_score"
    __table_args__ = (
        CheckConstraint("upvotes >= 0", name="ck_question_score_upvotes"),
        CheckConstraint("downvotes >= 0", name="ck_question_score_downvotes"),
    )

    question_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("question.question_id", ondelete="CASCADE"),
        primary_key=True,
    )
    base_score: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=lambda: settings.default_base_score,
    )
    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    downvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    @hybrid_property
    def total_score(self) -> int:
        return self.base_score + self.upvotes - self.downvotes
