"""Logging setup for the API process."""

from __future__ import annotations

import logging

from company_reviews.core.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the running process.

    Args:
        level: Optional level name overriding ``settings.log_level``.
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
    # SQLAlchemy echoes through its own logger when SQL_DEBUG is on.
    if settings.sql_debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
