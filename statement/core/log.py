"""Logging initialization with labeled prefixes.

Every module logs through ``logging.getLogger(__name__)``; this module only
configures the ``statement`` logger tree once per process.
"""

from __future__ import annotations

import logging
import os
import sys

__all__ = [
    "setup_logging",
    "reset_logging",
]

_configured: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Prefix each record with a short level label (INFO|WARN|ERROR)."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        message = f"{level_label} [{record.name}] {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a stdout handler to the ``statement`` logger.

    Idempotent; the level comes from ``STATEMENT_LOG_LEVEL`` unless given.
    """
    global _configured

    if _configured is not None:
        return _configured

    level_name = (level or os.getenv("STATEMENT_LOG_LEVEL") or "INFO").upper()
    logger = logging.getLogger("statement")
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    _configured = logger
    return logger


def reset_logging() -> None:
    """Forget the configured logger. Mainly for tests."""
    global _configured

    if _configured is not None:
        for handler in _configured.handlers[:]:
            _configured.removeHandler(handler)
        _configured.propagate = True
    _configured = None
