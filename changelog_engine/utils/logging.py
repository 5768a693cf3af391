"""JSON log records for the changelog engine, written to stderr."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional

from ..config.settings import settings

# Attributes every LogRecord carries; anything else was passed via ``extra``
_RESERVED_RECORD_FIELDS = {
    "name", "msg", "args", "levelname", "levelno", "pathname",
    "filename", "module", "exc_info", "exc_text", "stack_info",
    "lineno", "funcName", "created", "msecs", "relativeCreated",
    "thread", "threadName", "processName", "process", "getMessage",
    "taskName", "message", "asctime",
}

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record; ``extra`` fields are nested under "extra"."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        extra = {k: v for k, v in record.__dict__.items() if k not in _RESERVED_RECORD_FIELDS}
        if extra:
            payload["extra"] = extra

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(
    level: Optional[str] = None,
    structured: Optional[bool] = None,
    include_console: bool = True
) -> None:
    """Reset root handlers; arguments left as None fall back to settings."""
    numeric_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    use_structured = settings.log_structured if structured is None else structured

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(numeric_level)

    if not include_console:
        return

    # stdout stays free for rendered changelogs
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(StructuredFormatter() if use_structured else logging.Formatter(PLAIN_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_timing(operation: str, duration_ms: float, **context) -> Dict[str, Any]:
    """``extra`` payload for a timed operation."""
    return {"event": "timing", "operation": operation, "duration_ms": duration_ms, **context}


def log_error(error: Exception, **context) -> Dict[str, Any]:
    """``extra`` payload describing an exception."""
    return {
        "event": "error",
        "error_type": type(error).__name__,
        "error_message": str(error),
        **context
    }


setup_logging()
