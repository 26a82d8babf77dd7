"""Unit tests for the ORM models defined in question_bank.models.

These tests verify mapping details the tally and catalog rely on: table
names, the composite vote key, the check constraints that keep counters
non-negative, and the ``total_score`` hybrid on both instance and class.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import attributes

from question_bank import models
from question_bank.core.settings import settings
from question_bank.models import QuestionScore, QuestionVote, VoteType


def test_table_names():
    """Model classes expose expected __tablename__ values."""
    assert models.Company.__tablename__ == "company"
    assert models.Employee.__tablename__ == "employee"
    assert models.Category.__tablename__ == "category"
    assert models.Subcategory.__tablename__ == "subcategory"
    assert models.Question.__tablename__ == "question"
    assert models.QuestionOption.__tablename__ == "question_option"
    assert QuestionVote.__tablename__ == "question_vote"
    assert QuestionScore.__tablename__ == "question_score"


def test_vote_composite_primary_key():
    """One vote row per (question, voter) pair."""
    pk_names = {c.name for c in QuestionVote.__table__.primary_key}
    assert pk_names == {"question_id", "voter_id"}


def test_score_keyed_by_question():
    pk_names = {c.name for c in QuestionScore.__table__.primary_key}
    assert pk_names == {"question_id"}


def test_relationships_are_instrumented_attributes():
    rel_attrs = [
        models.Question.options,
        models.QuestionOption.question,
        models.Category.subcategories,
        models.Subcategory.category,
    ]
    for a in rel_attrs:
        assert isinstance(a, attributes.InstrumentedAttribute)


def test_vote_type_counters():
    assert VoteType("upvote") is VoteType.UPVOTE
    assert VoteType.UPVOTE.counter == "upvotes"
    assert VoteType.DOWNVOTE.counter == "downvotes"


def test_total_score_hybrid(db_session, test_question):
    row = QuestionScore(question_id=test_question.question_id, base_score=100, upvotes=5, downvotes=2)
    db_session.add(row)
    db_session.commit()

    assert row.total_score == 103
    stored = db_session.scalar(
        select(QuestionScore.total_score).where(
            QuestionScore.question_id == test_question.question_id
        )
    )
    assert stored == 103


def test_negative_counter_rejected(db_session, test_question):
    db_session.add(
        QuestionScore(question_id=test_question.question_id, base_score=100, upvotes=-1, downvotes=0)
    )
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_unknown_vote_type_rejected(db_session, test_question):
    db_session.add(
        QuestionVote(question_id=test_question.question_id, voter_id=1, vote_type="sideways")
    )
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_base_score_default_follows_settings(db_session, test_question, monkeypatch):
    monkeypatch.setattr(settings, "default_base_score", 40)

    row = QuestionScore(question_id=test_question.question_id)
    db_session.add(row)
    db_session.commit()

    assert (row.base_score, row.upvotes, row.downvotes) == (40, 0, 0)
    assert row.total_score == 40
