"""CRUD helpers for the question catalog.

The catalog owns companies, employees, the category tree and the questions
themselves. It never touches votes or scores; the tally service only asks it
whether a question is open for voting.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from question_bank.models import (
    Category,
    Company,
    Employee,
    Question,
    QuestionOption,
    Subcategory,
)
from question_bank.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    SubcategoryCreate,
    SubcategoryUpdate,
)
from question_bank.schemas.company import CompanyCreate, CompanyUpdate
from question_bank.schemas.employee import EmployeeCreate, EmployeeUpdate
from question_bank.schemas.question import OptionIn, QuestionCreate, QuestionUpdate

logger = logging.getLogger(__name__)

_EMAIL_TAKEN = "Employee email already registered"
_CATEGORY_TAKEN = "Category name already exists"

__all__ = [
    "CatalogError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "InvalidReferenceError",
    "DependencyConflictError",
    "EmptyUpdateError",
    "SqlQuestionCatalog",
    "list_companies",
    "create_company",
    "update_company",
    "deactivate_company",
    "list_employees",
    "create_employee",
    "update_employee",
    "deactivate_employee",
    "list_categories",
    "create_category",
    "update_category",
    "delete_category",
    "list_subcategories",
    "create_subcategory",
    "update_subcategory",
    "delete_subcategory",
    "list_questions",
    "get_question",
    "create_question",
    "update_question",
    "deactivate_question",
]


class CatalogError(RuntimeError):
    """Base exception raised for catalog failures."""


class EntityNotFoundError(CatalogError, LookupError):
    """Raised when the addressed entity does not exist or is inactive."""

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity


class DuplicateEntityError(CatalogError):
    """Raised when a unique attribute is already taken."""


class InvalidReferenceError(CatalogError, ValueError):
    """Raised when a payload points at a row that cannot be referenced."""


class DependencyConflictError(CatalogError):
    """Raised when a delete would orphan dependent rows."""


class EmptyUpdateError(CatalogError, ValueError):
    """Raised when a partial update carries no fields."""

    def __init__(self) -> None:
        super().__init__("No valid fields provided for update")


class SqlQuestionCatalog:
    """Question lookups the tally service depends on."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists_and_active(self, question_id: int) -> bool:
        """Return True if the question exists and has not been soft deleted."""
        stmt = select(Question.question_id).where(
            Question.question_id == question_id,
            Question.is_active.is_(True),
        )
        return self.session.execute(stmt).first() is not None


def _changes(update_data: BaseModel, *, exclude: set[str] | None = None) -> dict[str, Any]:
    changes = update_data.model_dump(exclude_unset=True, exclude=exclude)
    if not changes and not (exclude and update_data.model_fields_set & exclude):
        raise EmptyUpdateError()
    return changes


def _apply(entity: Any, changes: dict[str, Any]) -> None:
    for key, value in changes.items():
        setattr(entity, key, value)


def _commit_unique(db: Session, message: str) -> None:
    # The pre-checks race with concurrent writers; the unique index decides.
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise DuplicateEntityError(message) from err


# Companies


def list_companies(db: Session) -> Sequence[Company]:
    """Return all active companies."""
    return db.scalars(select(Company).where(Company.is_active.is_(True))).all()


def _get_company(db: Session, company_id: int) -> Company:
    company = db.get(Company, company_id)
    if company is None:
        raise EntityNotFoundError("Company")
    return company


def create_company(db: Session, data: CompanyCreate) -> Company:
    """Persist a new company."""
    company = Company(**data.model_dump())
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info("Created company %s", company.company_id)
    return company


def update_company(db: Session, company_id: int, data: CompanyUpdate) -> Company:
    """Apply a partial update, including re-activation through ``is_active``."""
    changes = _changes(data)
    company = _get_company(db, company_id)
    _apply(company, changes)
    db.commit()
    db.refresh(company)
    return company


def deactivate_company(db: Session, company_id: int) -> None:
    """Soft delete a company."""
    company = _get_company(db, company_id)
    company.is_active = False
    db.commit()


# Employees


def list_employees(db: Session) -> Sequence[Employee]:
    """Return all active employees."""
    return db.scalars(select(Employee).where(Employee.is_active.is_(True))).all()


def _get_employee(db: Session, employee_id: int) -> Employee:
    employee = db.get(Employee, employee_id)
    if employee is None:
        raise EntityNotFoundError("Employee")
    return employee


def _ensure_email_free(db: Session, email: str, *, exclude_id: int | None = None) -> None:
    stmt = select(Employee.employee_id).where(Employee.employee_email == email)
    if exclude_id is not None:
        stmt = stmt.where(Employee.employee_id != exclude_id)
    if db.execute(stmt).first() is not None:
        raise DuplicateEntityError(_EMAIL_TAKEN)


def create_employee(db: Session, data: EmployeeCreate) -> Employee:
    """Persist a new employee."""
    _ensure_email_free(db, str(data.employee_email))
    employee = Employee(
        employee_name=data.employee_name,
        employee_email=str(data.employee_email),
    )
    db.add(employee)
    _commit_unique(db, _EMAIL_TAKEN)
    db.refresh(employee)
    logger.info("Created employee %s", employee.employee_id)
    return employee


def update_employee(db: Session, employee_id: int, data: EmployeeUpdate) -> Employee:
    """Apply a partial update to an employee."""
    changes = _changes(data)
    employee = _get_employee(db, employee_id)
    if "employee_email" in changes:
        changes["employee_email"] = str(changes["employee_email"])
        _ensure_email_free(db, changes["employee_email"], exclude_id=employee_id)
    _apply(employee, changes)
    _commit_unique(db, _EMAIL_TAKEN)
    db.refresh(employee)
    return employee


def deactivate_employee(db: Session, employee_id: int) -> None:
    """Soft delete an employee."""
    employee = _get_employee(db, employee_id)
    employee.is_active = False
    db.commit()


# Categories


def list_categories(db: Session) -> Sequence[Category]:
    """Return every category."""
    return db.scalars(select(Category).order_by(Category.category_id)).all()


def _get_category(db: Session, category_id: int) -> Category:
    category = db.get(Category, category_id)
    if category is None:
        raise EntityNotFoundError("Category")
    return category


def _ensure_category_name_free(db: Session, name: str, *, exclude_id: int | None = None) -> None:
    stmt = select(Category.category_id).where(Category.category_name == name)
    if exclude_id is not None:
        stmt = stmt.where(Category.category_id != exclude_id)
    if db.execute(stmt).first() is not None:
        raise DuplicateEntityError(_CATEGORY_TAKEN)


def _count_active_questions(db: Session, *criteria: Any) -> int:
    stmt = select(func.count()).select_from(Question).where(
        Question.is_active.is_(True),
        *criteria,
    )
    return int(db.scalar(stmt) or 0)


def create_category(db: Session, data: CategoryCreate) -> Category:
    """Persist a new category with a unique name."""
    _ensure_category_name_free(db, data.category_name)
    category = Category(**data.model_dump())
    db.add(category)
    _commit_unique(db, _CATEGORY_TAKEN)
    db.refresh(category)
    return category


def update_category(db: Session, category_id: int, data: CategoryUpdate) -> Category:
    """Apply a partial update to a category."""
    changes = _changes(data)
    category = _get_category(db, category_id)
    if "category_name" in changes:
        _ensure_category_name_free(db, changes["category_name"], exclude_id=category_id)
    _apply(category, changes)
    _commit_unique(db, _CATEGORY_TAKEN)
    db.refresh(category)
    return category


def delete_category(db: Session, category_id: int) -> None:
    """Delete a category that has no subcategories and no active questions."""
    category = _get_category(db, category_id)

    subcategory_count = db.scalar(
        select(func.count()).select_from(Subcategory).where(
            Subcategory.category_id == category_id,
        )
    )
    if subcategory_count:
        raise DependencyConflictError("Cannot delete category with existing subcategories")

    if _count_active_questions(db, Question.category_id == category_id):
        raise DependencyConflictError("Cannot delete category that is being used by questions")

    db.delete(category)
    db.commit()
    logger.info("Deleted category %s", category_id)


# Subcategories


def list_subcategories(db: Session, category_id: int) -> Sequence[Subcategory]:
    """Return the subcategories of one category."""
    _get_category(db, category_id)
    return db.scalars(
        select(Subcategory)
        .where(Subcategory.category_id == category_id)
        .order_by(Subcategory.subcategory_id)
    ).all()


def _get_subcategory(db: Session, subcategory_id: int) -> Subcategory:
    subcategory = db.get(Subcategory, subcategory_id)
    if subcategory is None:
        raise EntityNotFoundError("Subcategory")
    return subcategory


def create_subcategory(db: Session, category_id: int, data: SubcategoryCreate) -> Subcategory:
    """Persist a subcategory under an existing category."""
    _get_category(db, category_id)
    subcategory = Subcategory(category_id=category_id, **data.model_dump())
    db.add(subcategory)
    db.commit()
    db.refresh(subcategory)
    return subcategory


def update_subcategory(db: Session, subcategory_id: int, data: SubcategoryUpdate) -> Subcategory:
    """Apply a partial update to a subcategory."""
    changes = _changes(data)
    subcategory = _get_subcategory(db, subcategory_id)
    _apply(subcategory, changes)
    db.commit()
    db.refresh(subcategory)
    return subcategory


def delete_subcategory(db: Session, subcategory_id: int) -> None:
    """Delete a subcategory that no active question uses."""
    subcategory = _get_subcategory(db, subcategory_id)
    if _count_active_questions(db, Question.subcategory_id == subcategory_id):
        raise DependencyConflictError(
            "Cannot delete subcategory that is being used by questions"
        )
    db.delete(subcategory)
    db.commit()


# Questions


def _validate_references(
    db: Session,
    *,
    writer_id: int | None = None,
    category_id: int | None = None,
    subcategory_id: int | None = None,
) -> None:
    if writer_id is not None:
        writer = db.get(Employee, writer_id)
        if writer is None or not writer.is_active:
            raise InvalidReferenceError("Question writer does not exist")
    if category_id is not None and db.get(Category, category_id) is None:
        raise InvalidReferenceError("Category does not exist")
    if subcategory_id is not None:
        subcategory = db.get(Subcategory, subcategory_id)
        if subcategory is None:
            raise InvalidReferenceError("Subcategory does not exist")
        if category_id is not None and subcategory.category_id != category_id:
            raise InvalidReferenceError("Subcategory does not belong to the category")


def _build_options(options: list[OptionIn]) -> list[QuestionOption]:
    return [
        QuestionOption(
            option_text=option.text,
            is_correct=option.is_correct,
            option_order=option.order,
        )
        for option in options
    ]


def list_questions(
    db: Session,
    *,
    category_id: int | None = None,
    subcategory_id: int | None = None,
    difficulty: str | None = None,
    question_type: str | None = None,
    limit: int = 100,
    offset: int = 0,
) -> Sequence[Question]:
    """Return active questions matching the optional filters."""
    stmt = select(Question).where(Question.is_active.is_(True))
    if category_id is not None:
        stmt = stmt.where(Question.category_id == category_id)
    if subcategory_id is not None:
        stmt = stmt.where(Question.subcategory_id == subcategory_id)
    if difficulty is not None:
        stmt = stmt.where(Question.difficulty_level == difficulty)
    if question_type is not None:
        stmt = stmt.where(Question.question_type == question_type)
    stmt = stmt.order_by(Question.question_id).limit(limit).offset(offset)
    return db.scalars(stmt).all()


def get_question(db: Session, question_id: int) -> Question:
    """Return an active question with its options loaded."""
    question = db.get(Question, question_id)
    if question is None or not question.is_active:
        raise EntityNotFoundError("Question")
    return question


def create_question(db: Session, data: QuestionCreate) -> Question:
    """Persist a question and, for MCQ questions, its options in one transaction."""
    _validate_references(
        db,
        writer_id=data.question_writer_id,
        category_id=data.category_id,
        subcategory_id=data.subcategory_id,
    )
    question = Question(**data.model_dump(exclude={"options"}))
    if data.question_type == "mcq" and data.options:
        question.options = _build_options(data.options)
    db.add(question)
    db.commit()
    db.refresh(question)
    logger.info("Created question %s", question.question_id)
    return question


def update_question(db: Session, question_id: int, data: QuestionUpdate) -> Question:
    """Apply a partial update; a supplied option list replaces the old one."""
    changes = _changes(data, exclude={"options"})
    question = get_question(db, question_id)

    category_id = changes.get("category_id", question.category_id)
    if "category_id" in changes or "subcategory_id" in changes:
        _validate_references(
            db,
            category_id=category_id,
            subcategory_id=changes.get("subcategory_id", question.subcategory_id),
        )

    _apply(question, changes)
    if data.options is not None:
        # delete-orphan cascade removes the previous rows in the same flush
        question.options = _build_options(data.options)
    db.commit()
    db.refresh(question)
    return question


def deactivate_question(db: Session, question_id: int) -> None:
    """Soft delete a question; its votes and score are kept."""
    question = get_question(db, question_id)
    question.is_active = False
    db.commit()
    logger.info("Deactivated question %s", question_id)
