"""Logging setup with correlation IDs and connection attempt counters."""

import logging
import uuid
from contextvars import ContextVar
from typing import Optional, Union

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    """Stamp every record with the current correlation ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = correlation_id_var.get() or "-"
        return True


# Outcomes of get_connection() calls in this process
operation_counts = {"success": 0, "failure": 0}


def record_success() -> None:
    operation_counts["success"] += 1


def record_failure() -> None:
    operation_counts["failure"] += 1


def reset_counts() -> None:
    operation_counts["success"] = 0
    operation_counts["failure"] = 0


def setup_logging(level: Union[int, str] = logging.INFO) -> str:
    """Configure root logging and generate a correlation ID.

    ``level`` may be a number or a level name such as ``"DEBUG"``. Returns the
    generated correlation ID.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    cid = uuid.uuid4().hex
    correlation_id_var.set(cid)

    root = logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(correlation_id)s] %(levelname)s %(name)s: %(message)s")
        )
        root.addHandler(handler)

    for handler in root.handlers:
        if not any(isinstance(f, CorrelationIdFilter) for f in handler.filters):
            handler.addFilter(CorrelationIdFilter())

    return cid
