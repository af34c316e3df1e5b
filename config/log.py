"""Logging setup shared by the LearnBoard packages."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

ROOT_LOGGERS = ("core", "analytics", "visualization", "app")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line; ``extra=`` fields are carried as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value) for key, value in record.__dict__.items() if key not in _STANDARD_ATTRS
        )
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, separators=(",", ":"), default=str)


def _formatter(structured_json: bool) -> logging.Formatter:
    return JsonFormatter() if structured_json else logging.Formatter(TEXT_FORMAT)


def configure_logging(level: str = "INFO", structured_json: bool = False) -> None:
    """Route each LearnBoard logger tree to stdout.

    Safe to call on every Streamlit rerun: the handler is added once, while
    the level and the formatter follow the latest settings.
    """

    resolved = getattr(logging, level.upper(), logging.INFO)
    for name in ROOT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        if not logger.handlers:
            logger.addHandler(logging.StreamHandler(sys.stdout))
            logger.propagate = False
        for handler in logger.handlers:
            handler.setFormatter(_formatter(structured_json))
