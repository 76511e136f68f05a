"""
Tests for logging configuration and timed operations.
"""

import logging

import pytest

from tracker.app.core.observability import StructuredFormatter, configure_logging, logger, timed_operation


@pytest.fixture
def clean_logger():
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield logger
    logger.handlers = original_handlers
    logger.setLevel(original_level)


def test_configure_logging_is_idempotent(clean_logger):
    configure_logging("debug")
    configure_logging("warning")

    installed = [h for h in clean_logger.handlers if getattr(h, "_tracker_handler", False)]
    assert len(installed) == 1
    assert clean_logger.level == logging.WARNING


def test_structured_formatter_appends_extra_fields():
    formatter = StructuredFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("tracker", logging.INFO, __file__, 1, "Operation Completed", None, None)
    record.operation = "register"
    record.number = 7

    assert formatter.format(record) == "INFO Operation Completed | number=7 operation=register"


def test_structured_formatter_without_extra_fields():
    formatter = StructuredFormatter("%(message)s")
    record = logging.LogRecord("tracker", logging.INFO, __file__, 1, "plain", None, None)

    assert formatter.format(record) == "plain"


@pytest.mark.asyncio
async def test_timed_operation_logs_success(caplog):
    caplog.set_level(logging.INFO, logger="tracker")

    async with timed_operation("demo", number=3, correlation_id="abc") as log_data:
        log_data["changed"] = True

    record = caplog.records[-1]
    assert record.getMessage() == "Operation Completed"
    assert record.operation == "demo"
    assert record.correlation_id == "abc"
    assert record.changed is True


@pytest.mark.asyncio
async def test_timed_operation_reraises_and_logs_failure(caplog):
    caplog.set_level(logging.INFO, logger="tracker")

    with pytest.raises(RuntimeError, match="boom"):
        async with timed_operation("demo"):
            raise RuntimeError("boom")

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.error == "RuntimeError"
