"""Logging setup for the Question Bank service."""
from __future__ import annotations

import logging

from question_bank.core.settings import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Attach a console handler to the root logger.

    Args:
        level: Logging level name. Falls back to ``settings.log_level``.
    """
    resolved = (level or settings.log_level).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("question_bank").setLevel(resolved)
    if settings.sql_debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
