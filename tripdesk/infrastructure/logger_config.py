"""Centralized logging configuration."""

import sys

from loguru import logger

from .config import settings

log_format = ' | '.join(
    (
        '<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>',
        '<lvl>{level:<8}</>',
        '<c>{name}:{function}:{line}</>',
        '{message}',
    )
)


def configure_logging(level: str | None = None) -> None:
    logger.remove()  # Drop the default handler so records are not printed twice
    logger.add(sys.stderr, format=log_format, level=(level or settings.log_level).upper())
