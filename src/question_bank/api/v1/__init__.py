"""Version 1 API endpoints."""

from .endpoints import (
    categories_router,
    companies_router,
    employees_router,
    questions_router,
    votes_router,
)

__all__ = [
    "categories_router",
    "companies_router",
    "employees_router",
    "questions_router",
    "votes_router",
]
