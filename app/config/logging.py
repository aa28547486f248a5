"""Structured logging setup. Read-only config; no business logic."""

import logging
import sys
from typing import Any

from app.config.settings import get_settings


def configure_logging() -> None:
    """Configure stdout logging for the application at the level from settings."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt = "%Y-%m-%dT%H:%M:%S"

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # Access logs are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def log_extra(extra: dict[str, Any]) -> dict[str, Any]:
    """Build a dict suitable for logger.info(..., **log_extra(...)) for structured fields."""
    return {"extra": extra}
