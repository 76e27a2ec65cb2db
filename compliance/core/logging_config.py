"""JSON log lines for the compliance service.

Each record becomes one JSON object so validations can be filtered by
``trace_id`` or ``document_type`` in the log aggregator.
"""

import json
import logging
from datetime import datetime, timezone

# Attributes passed through ``extra={...}`` that are copied into the JSON line
_EXTRA_KEYS = (
    "trace_id",
    "document_type",
    "error_code",
    "missing_count",
    "duration_ms",
    "http_status",
    "path",
    "field",
    "error_type",
)

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = ("httpx", "asyncio", "uvicorn.access")


def _utc_timestamp(created: float) -> str:
    moment = datetime.fromtimestamp(created, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


class StructuredFormatter(logging.Formatter):
    """Render a log record as a single JSON object.

    Example:
        >>> logger.info("Validated", extra={"document_type": "bylaws", "missing_count": 0})
        {"timestamp": "2024-07-01T12:00:00.000Z", "level": "INFO", "logger": "...",
         "message": "Validated", ..., "document_type": "bylaws", "missing_count": 0}
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": _utc_timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        payload.update(
            (key, getattr(record, key)) for key in _EXTRA_KEYS if hasattr(record, key)
        )

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            payload["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_structured_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Install a single stream handler on the root logger.

    Args:
        level: Level name, case-insensitive (``"debug"`` works)
        json_format: JSON lines when True, a plain one-line format otherwise
    """
    handler = logging.StreamHandler()
    handler.setFormatter(
        StructuredFormatter()
        if json_format
        else logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
