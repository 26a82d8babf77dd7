"""Vote tally service.

Keeps ``question_score`` consistent with ``question_vote``: for every
question the cached ``upvotes``/``downvotes`` equal the number of vote rows
in each direction. Each submission runs as one transaction that locks the
score row before reading the voter's previous vote, so concurrent
submissions for a question apply in some serial order.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Protocol

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from question_bank.core.settings import settings
from question_bank.db.session import begin_write
from question_bank.models import QuestionScore, QuestionVote, VoteType
from question_bank.schemas.vote import ScoreResponse
from question_bank.services.catalog import SqlQuestionCatalog

logger = logging.getLogger(__name__)

__all__ = [
    "QuestionCatalog",
    "ScoreSnapshot",
    "TallyService",
    "TallyError",
    "InvalidVoteError",
    "QuestionNotFoundError",
    "TallyOperationFailedError",
    "to_score_response",
]


class TallyError(RuntimeError):
    """Base exception raised by the tally service."""


class InvalidVoteError(TallyError, ValueError):
    """Raised when the vote type is not one of the supported directions."""


class QuestionNotFoundError(TallyError, LookupError):
    """Raised when the question is unknown or no longer active."""

    def __init__(self, question_id: int) -> None:
        super().__init__(f"Question {question_id} not found")
        self.question_id = question_id


class TallyOperationFailedError(TallyError):
    """Raised when the vote transaction could not be committed.

    The transaction has been rolled back; neither table was modified.
    """


class QuestionCatalog(Protocol):
    """Question lookups needed before a vote is accepted."""

    def exists_and_active(self, question_id: int) -> bool: ...


@dataclass(frozen=True)
class ScoreSnapshot:
    """Point-in-time view of a question's score."""

    question_id: int
    base_score: int
    upvotes: int
    downvotes: int

    @property
    def total_score(self) -> int:
        """Base score adjusted by the vote balance."""
        return self.base_score + self.upvotes - self.downvotes

    @classmethod
    def from_row(cls, row: QuestionScore) -> ScoreSnapshot:
        return cls(
            question_id=row.question_id,
            base_score=row.base_score,
            upvotes=row.upvotes,
            downvotes=row.downvotes,
        )


def _coerce_vote_type(vote_type: VoteType | str) -> VoteType:
    try:
        return VoteType(vote_type)
    except ValueError as err:
        raise InvalidVoteError(
            f"Invalid vote type {vote_type!r}; expected 'upvote' or 'downvote'"
        ) from err


class TallyService:
    """Sole writer of question votes and scores.

    Args:
        session: SQLAlchemy session the service runs its transactions on.
        catalog: Collaborator answering ``exists_and_active``. Defaults to a
            catalog backed by the same session.
        base_score: Starting score for questions without votes.
    """

    def __init__(
        self,
        session: Session,
        catalog: QuestionCatalog | None = None,
        *,
        base_score: int | None = None,
    ) -> None:
        self.session = session
        self.catalog = catalog if catalog is not None else SqlQuestionCatalog(session)
        self.base_score = settings.default_base_score if base_score is None else base_score

    def submit_vote(
        self,
        question_id: int,
        voter_id: int,
        vote_type: VoteType | str,
    ) -> ScoreSnapshot:
        """Record ``voter_id``'s vote and return the updated score.

        Raises:
            InvalidVoteError: ``vote_type`` is not upvote or downvote.
            QuestionNotFoundError: The question is missing or inactive.
            TallyOperationFailedError: The transaction failed and was rolled back.
        """
        direction = _coerce_vote_type(vote_type)

        try:
            begin_write(self.session)
            if not self.catalog.exists_and_active(question_id):
                raise QuestionNotFoundError(question_id)
            outcome = self._apply_vote(question_id, voter_id, direction)
            snapshot = self._load_score(question_id)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.warning(
                "Vote on question %s by voter %s rolled back",
                question_id,
                voter_id,
                exc_info=True,
            )
            raise TallyOperationFailedError(
                f"Could not record vote on question {question_id}"
            ) from exc
        except BaseException:
            self.session.rollback()
            raise

        logger.debug(
            "Vote %s on question %s by voter %s: %s",
            direction.value,
            question_id,
            voter_id,
            outcome,
        )
        return snapshot

    def get_score(self, question_id: int) -> ScoreSnapshot:
        """Return the stored score, or the untouched default if nobody voted yet."""
        with self._read():
            return self._load_score(question_id)

    def get_voter_choice(self, question_id: int, voter_id: int) -> VoteType | None:
        """Return the voter's current direction on the question, if any."""
        stmt = select(QuestionVote.vote_type).where(
            QuestionVote.question_id == question_id,
            QuestionVote.voter_id == voter_id,
        )
        with self._read():
            value = self.session.execute(stmt).scalar_one_or_none()
        return VoteType(value) if value is not None else None

    @contextmanager
    def _read(self) -> Iterator[None]:
        # A read that opened the transaction also ends it.
        owns_transaction = not self.session.in_transaction()
        try:
            yield
        finally:
            if owns_transaction:
                self.session.rollback()

    def _load_score(self, question_id: int) -> ScoreSnapshot:
        stmt = (
            select(QuestionScore)
            .where(QuestionScore.question_id == question_id)
            .execution_options(populate_existing=True)
        )
        row = self.session.execute(stmt).scalar_one_or_none()
        if row is None:
            return ScoreSnapshot(
                question_id=question_id,
                base_score=self.base_score,
                upvotes=0,
                downvotes=0,
            )
        return ScoreSnapshot.from_row(row)

    def _apply_vote(self, question_id: int, voter_id: int, direction: VoteType) -> str:
        self._ensure_score_row(question_id)
        self._lock_score_row(question_id)

        existing = self.session.execute(
            select(QuestionVote).where(
                QuestionVote.question_id == question_id,
                QuestionVote.voter_id == voter_id,
            )
        ).scalar_one_or_none()

        if existing is None:
            self._adjust_counters(question_id, {direction.counter: 1})
            self.session.add(
                QuestionVote(
                    question_id=question_id,
                    voter_id=voter_id,
                    vote_type=direction.value,
                )
            )
            self.session.flush()
            return "created"

        previous = VoteType(existing.vote_type)
        if previous is direction:
            return "unchanged"

        self._adjust_counters(question_id, {previous.counter: -1, direction.counter: 1})
        existing.vote_type = direction.value
        self.session.flush()
        return "changed"

    def _ensure_score_row(self, question_id: int) -> None:
        values: dict[str, Any] = {
            "question_id": question_id,
            "base_score": self.base_score,
            "upvotes": 0,
            "downvotes": 0,
        }
        dialect = self.session.get_bind().dialect.name
        if dialect == "postgresql":
            stmt = postgresql.insert(QuestionScore).values(**values).on_conflict_do_nothing(
                index_elements=["question_id"]
            )
        elif dialect == "sqlite":
            stmt = sqlite.insert(QuestionScore).values(**values).on_conflict_do_nothing(
                index_elements=["question_id"]
            )
        else:
            if self.session.get(QuestionScore, question_id) is None:
                self.session.add(QuestionScore(**values))
                self.session.flush()
            return
        self.session.execute(stmt)

    def _lock_score_row(self, question_id: int) -> None:
        # SQLite drops FOR UPDATE; its BEGIN IMMEDIATE transaction already holds the write lock.
        self.session.execute(
            select(QuestionScore.question_id)
            .where(QuestionScore.question_id == question_id)
            .with_for_update()
        )

    def _adjust_counters(self, question_id: int, deltas: dict[str, int]) -> None:
        values = {
            name: getattr(QuestionScore, name) + delta for name, delta in deltas.items()
        }
        self.session.execute(
            update(QuestionScore)
            .where(QuestionScore.question_id == question_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )


def to_score_response(snapshot: ScoreSnapshot) -> ScoreResponse:
    """Convert a score snapshot to its API schema."""
    return ScoreResponse(
        question_id=snapshot.question_id,
        total_score=snapshot.total_score,
        upvotes=snapshot.upvotes,
        downvotes=snapshot.downvotes,
    )
