"""Business logic services for the Question Bank application."""

from .catalog import CatalogError, SqlQuestionCatalog
from .tally import ScoreSnapshot, TallyError, TallyService

__all__ = [
    "CatalogError",
    "SqlQuestionCatalog",
    "ScoreSnapshot",
    "TallyError",
    "TallyService",
]
