"""Structured JSON logging for host applications"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from ninejapay.config import Settings
from ninejapay.domain.exceptions import NineJaPayError

SERVICE_NAME = "ninejapay-sdk"

logger = logging.getLogger(__name__)


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def setup_logging(level: str = "INFO", stream=None) -> None:
    """Configure structured JSON logging on the root logger.

    The SDK never calls this itself; host applications opt in.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers
    root.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    root.addHandler(handler)


def setup_logging_from_settings(settings: Settings | None = None, stream=None) -> None:
    """Configure JSON logging at NINEJAPAY_LOG_LEVEL"""
    setup_logging((settings or Settings()).log_level, stream=stream)


def log_call(
    method: str,
    path: str,
    operation: str,
    http_status: int | None,
    duration_ms: float,
) -> None:
    """Log a completed 9jaPay call"""
    logger.debug(
        "9jaPay call completed",
        extra={
            "operation": operation,
            "method": method,
            "path": path,
            "http_status": http_status,
            "duration_ms": duration_ms,
        },
    )


def log_failure(operation: str, error: NineJaPayError, duration_ms: float) -> None:
    """Log a failed 9jaPay call"""
    logger.warning(
        f"9jaPay call failed: {error.message}",
        extra={
            "operation": operation,
            "error_kind": error.kind,
            "http_status": error.http_status,
            "nine_ja_pay_status_code": error.nine_ja_pay_status_code,
            "duration_ms": duration_ms,
        },
    )
