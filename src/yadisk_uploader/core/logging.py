"""Logging configuration for the Yandex Disk uploader."""

import contextvars
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, TextIO

from yadisk_uploader.core.config import Settings

# Destination path of the upload in progress, stamped on every log line
target_path_context: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "target_path", default=None
)

LOGGER_NAME = "yadisk_uploader"

# Attribute names of a bare LogRecord; anything else on a record came from extra={...}
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: ``extra`` fields are merged at the top
    level and the current upload destination is added when known."""

    def __init__(self, service: str = LOGGER_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "severity": record.levelname,
            "service": self.service,
            "logger": record.name,
            "message": record.getMessage(),
            "source": f"{record.filename}:{record.lineno} {record.funcName}",
        }

        target_path = target_path_context.get()
        if target_path:
            log_entry["target_path"] = target_path

        log_entry.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS
        )

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_entry["stack"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str, ensure_ascii=False)


def setup_logging(settings: Settings, stream: TextIO | None = None) -> logging.Logger:
    """Build the uploader logger.

    The returned logger writes to stdout (or ``stream``) and does not
    propagate to the root logger, so nothing process-wide is reconfigured.
    Components receive it, or one of its children, explicitly.

    Args:
        settings: Loaded settings; LOG_LEVEL and LOG_FORMAT are honoured
        stream: Output stream, defaults to the current ``sys.stdout``

    Returns:
        Configured logger
    """
    log_level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)

    if settings.LOG_FORMAT == "text":
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = JsonLogFormatter(service=settings.SERVICE_NAME)

    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False

    return logger
