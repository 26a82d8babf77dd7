"""API endpoint modules for version 1."""

from .categories import router as categories_router
from .companies import router as companies_router
from .employees import router as employees_router
from .questions import router as questions_router
from .votes import router as votes_router

__all__ = [
    "categories_router",
    "companies_router",
    "employees_router",
    "questions_router",
    "votes_router",
]
