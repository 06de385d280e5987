# core/logging_utils.py
from __future__ import annotations
import sys

from loguru import logger

from core.config import LOG_LEVEL

_CONFIGURED = False


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Replace loguru's default sink with a single stderr sink (idempotent)."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
    )
    _CONFIGURED = True
