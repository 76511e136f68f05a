"""
Logging setup for the Parcel Tracker.

Adds structured fields and timing around service operations.
"""

import time
import uuid
import logging
from contextlib import asynccontextmanager

# Configure structured logger
logger = logging.getLogger("tracker")

# Attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """Appends `extra=` fields to the message as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        fields = {
            key: value for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS
        }
        if not fields:
            return base
        rendered = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
        return f"{base} | {rendered}"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the project logger.

    Safe to call more than once: the handler is only installed the first time,
    later calls just update the level.
    """
    logger.setLevel(level.upper())
    if not any(getattr(h, "_tracker_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        handler._tracker_handler = True
        logger.addHandler(handler)
    return logger


@asynccontextmanager
async def timed_operation(name: str, log: logging.Logger = logger, **fields):
    """
    Log the duration of an operation.

    Failures are logged at ERROR and re-raised unchanged.
    """
    # 1. Correlation ID ties together log lines of one operation
    correlation_id = fields.pop("correlation_id", None) or str(uuid.uuid4())

    # 2. Start Timer
    start_time = time.perf_counter()

    log_data = {"correlation_id": correlation_id, "operation": name, **fields}
    try:
        yield log_data
    except Exception as exc:
        log_data["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
        log_data["error"] = type(exc).__name__
        log.error("Operation Failed", extra=log_data)
        raise

    # 3. Structured Log
    log_data["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
    log.info("Operation Completed", extra=log_data)
