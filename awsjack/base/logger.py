"""
Structured logging for Awsjack.

Provides a pre-configured logger that emits JSON-structured log records
with request context (service, operation, request id) for easy filtering
in log aggregation tools.
"""

from __future__ import annotations

import json
import logging
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Attach any extras injected via AwsjackLogger.log_operation
        for key in ("request_id", "service", "operation"):
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])
        return json.dumps(log_entry)


class AwsjackLogger:
    """Convenience wrapper around :mod:`logging` for client operations."""

    def __init__(self, name: str = "awsjack") -> None:
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredFormatter())
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def log_operation(
        self,
        level: int,
        message: str,
        *,
        service: str | None = None,
        operation: str | None = None,
        request_id: str | None = None,
        exc_info: bool = False,
    ) -> None:
        """Emit a structured log record with operation context.

        Args:
            level: Logging level (e.g. logging.INFO).
            message: Human-readable message.
            service: Service client name (e.g. 'EKS').
            operation: AWS operation name (e.g. 'DescribeCluster').
            request_id: Correlation ID; left out of the record when omitted.
            exc_info: Whether to include exception info.
        """
        extra = {
            "service": service,
            "operation": operation,
            "request_id": request_id,
        }
        self.logger.log(level, message, extra=extra, exc_info=exc_info)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.CRITICAL, message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.DEBUG, message, **kwargs)


# Module-level singleton
aj_logger = AwsjackLogger()
