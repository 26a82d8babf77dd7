"""SQLAlchemy models for the Question Bank application."""

from .category import Category, Subcategory
from .company import Company
from .employee import Employee
from .question import Question, QuestionOption
from .vote import QuestionScore, QuestionVote, VoteType

__all__ = [
    "Category", "Subcategory",
    "Company",
    "Employee",
    "Question", "QuestionOption",
    "QuestionScore", "QuestionVote", "VoteType",
]
