"""Process-wide logging configuration.

Console or JSON output on a single root StreamHandler. Fields passed through
``extra=`` are appended as ``key=value`` pairs (console) or merged into the
JSON object.
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any

from praetor.config import Settings

_STANDARD_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName", "color_message"}

_CONFIGURED_FLAG = "_praetor_configured"


def _record_extras(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS}


def _format_time(record: logging.LogRecord) -> str:
    dt = datetime.fromtimestamp(record.created, tz=UTC)
    return f"{dt.strftime('%Y-%m-%dT%H:%M:%S')}.{int(record.msecs):03d}Z"


class ConsoleLogFormatter(logging.Formatter):
    """``2025-11-27T02:57:00.302Z INFO  praetor.x role.created role_id=...``"""

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s %(levelname)-5s %(name)s %(message)s")

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return _format_time(record)

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = " ".join(f"{k}={v}" for k, v in sorted(_record_extras(record).items()))
        return f"{base} {extras}" if extras else base


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": _format_time(record),
            "level": record.levelname,
            "service": "praetor",
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(_record_extras(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


def setup_logging(settings: Settings) -> None:
    """Install one root handler with the configured format and level."""
    root_logger = logging.getLogger()
    if not getattr(root_logger, _CONFIGURED_FLAG, False) or not root_logger.handlers:
        root_logger.handlers = [logging.StreamHandler()]
        setattr(root_logger, _CONFIGURED_FLAG, True)

    formatter = JsonLogFormatter() if settings.log_format == "json" else ConsoleLogFormatter()
    root_logger.handlers[0].setFormatter(formatter)
    root_logger.setLevel(logging.DEBUG if settings.debug else settings.log_level)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
