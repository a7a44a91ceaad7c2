"""Logging setup and redaction helpers for user-provided content."""

from __future__ import annotations

import logging
import re

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(?:(?:\+?\d[\d\s().-]{7,}\d))")
SECRET_RE = re.compile(r"\b(?:sk|rk)-[A-Za-z0-9_-]{8,}\b")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    logger = logging.getLogger("cv_suggester")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    return logger


def redact_text(value: str, max_length: int = 200) -> str:
    redacted = EMAIL_RE.sub("[REDACTED_EMAIL]", value or "")
    redacted = SECRET_RE.sub("[REDACTED_KEY]", redacted)
    redacted = PHONE_RE.sub("[REDACTED_PHONE]", redacted)
    if len(redacted) > max_length:
        return f"{redacted[:max_length]}..."
    return redacted
