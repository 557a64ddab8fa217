"""Logging setup shared by the library, the CLI and the server."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from doxtree.config import DOXTREE_LOG_FORMAT, DOXTREE_LOG_LEVEL

_ROOT_LOGGER = "doxtree"

# Attributes present on every LogRecord; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_extra_fields(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable formatter that appends ``extra`` fields as key=value pairs."""

    def __init__(self) -> None:
        super().__init__(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = _extra_fields(record)
        if not extras:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in extras.items())
        return f"{message} [{pairs}]"


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


def configure_logging(
    level: str | int | None = None,
    *,
    fmt: str | None = None,
) -> logging.Logger:
    """Install a single stream handler on the doxtree logger.

    Args:
        level: Log level name or number. Defaults to ``DOXTREE_LOG_LEVEL``.
        fmt: ``"text"`` or ``"json"``. Defaults to ``DOXTREE_LOG_FORMAT``.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    resolved_level = level if level is not None else DOXTREE_LOG_LEVEL
    if isinstance(resolved_level, str):
        resolved_level = resolved_level.upper()
    logger.setLevel(resolved_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if (fmt or DOXTREE_LOG_FORMAT).lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(TextFormatter())
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the doxtree namespace."""
    if name == _ROOT_LOGGER or name.startswith(_ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
