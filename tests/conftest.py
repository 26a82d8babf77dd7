from __future__ import annotations

import os
from collections.abc import Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from question_bank.core.security import create_access_token
from question_bank.db.session import Base, build_engine
from question_bank.db.session import get_db as app_get_session
from question_bank.main import app as fastapi_app
from question_bank.models import Category, Employee, Question, QuestionOption, Subcategory
from question_bank.services.tally import TallyService

TEST_DB_URL = "sqlite://"
VOTER_ID = 1
OTHER_VOTER_ID = 2


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = build_engine(TEST_DB_URL, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    """Session whose commits land in a SAVEPOINT of an outer, discarded transaction."""
    connection = engine.connect()
    transaction = connection.begin()
    session = Session(
        bind=connection,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    try:
        yield session
    finally:
        session.close()
        if transaction.is_active:
            transaction.rollback()
        connection.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def auth_token() -> dict[str, str]:
    """Return authorization headers for the primary voter."""
    return {"Authorization": f"Bearer {create_access_token(VOTER_ID)}"}


@pytest.fixture()
def other_auth_token() -> dict[str, str]:
    """Return authorization headers for the secondary voter."""
    return {"Authorization": f"Bearer {create_access_token(OTHER_VOTER_ID)}"}


@pytest.fixture()
def tally(db_session: Session) -> TallyService:
    return TallyService(db_session)


@pytest.fixture()
def employee(db_session: Session) -> Iterator[Employee]:
    """Create a question writer."""
    employee = Employee(employee_name="Asha Rao", employee_email="asha@example.com")
    db_session.add(employee)
    db_session.commit()
    db_session.refresh(employee)
    yield employee


@pytest.fixture()
def category(db_session: Session) -> Iterator[Category]:
    category = Category(category_name="Aptitude", category_description="Numbers and logic")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    yield category


@pytest.fixture()
def subcategory(db_session: Session, category: Category) -> Iterator[Subcategory]:
    subcategory = Subcategory(category_id=category.category_id, subcategory_name="Percentages")
    db_session.add(subcategory)
    db_session.commit()
    db_session.refresh(subcategory)
    yield subcategory


@pytest.fixture()
def test_question(
    db_session: Session,
    employee: Employee,
    category: Category,
    subcategory: Subcategory,
) -> Iterator[Question]:
    """Create an active MCQ question with two options."""
    question = Question(
        question_text="What is 20% of 50?",
        question_writer_id=employee.employee_id,
        category_id=category.category_id,
        subcategory_id=subcategory.subcategory_id,
        question_type="mcq",
        difficulty_level="easy",
    )
    question.options = [
        QuestionOption(option_text="10", is_correct=True, option_order=1),
        QuestionOption(option_text="5", is_correct=False, option_order=2),
    ]
    db_session.add(question)
    db_session.commit()
    db_session.refresh(question)
    yield question
