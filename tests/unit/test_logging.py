"""Unit tests for sundries.logging."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler

from sundries.logging import (
    LoggingSettings,
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    configure_logging,
    log_startup,
)

# pylint: disable=magic-value-comparison


def make_record(name: str) -> logging.LogRecord:
    """Build a bare INFO record for logger `name`."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    "name, prefix",
    [
        ("asyncio.base_events", "[asyncio] "),
        ("urllib3", "[urllib3] "),
        ("sundries.uri", ""),
        ("sundries_other", "[sundries_other] "),
    ],
)
def test_third_party_prefix_filter(name, prefix):
    """Only records from outside the project get a bracketed prefix."""
    record = make_record(name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix


def test_console_handler_normal_mode():
    """Normal mode keeps the requested level and adds the prefix filter."""
    handler = config_console_handler(level=logging.WARNING)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)


def test_console_handler_debug_mode():
    """Debug mode forces DEBUG and drops the prefix filter."""
    handler = config_console_handler(level=logging.ERROR, debug_mode=True, color=False)
    assert handler.level == logging.DEBUG
    assert not handler.filters


def test_flight_recorder_buffers_until_warning(tmp_path):
    """Nothing reaches the file until a WARNING flushes the buffer."""
    path = tmp_path / "recorder.log"
    recorder = config_flight_recorder(path, capacity=100)
    assert isinstance(recorder, MemoryHandler)

    logger = logging.getLogger("sundries.tests.recorder")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    file_handler = recorder.target
    logger.addHandler(recorder)
    try:
        logger.debug("buffered detail")
        assert not path.exists()
        logger.warning("something odd")
        content = path.read_text(encoding="utf-8")
    finally:
        logger.removeHandler(recorder)
        recorder.close()
        file_handler.close()
        logger.propagate = True

    assert "buffered detail" in content
    assert "WARNING sundries.tests.recorder" in content


def test_flight_recorder_flush_on_close(tmp_path):
    """With flush_on_close, buffered records are written when the handler closes."""
    path = tmp_path / "recorder.log"
    recorder = config_flight_recorder(path, flush_on_close=True)
    file_handler = recorder.target
    recorder.handle(make_record("sundries.tests"))
    recorder.close()
    file_handler.close()
    assert "msg" in path.read_text(encoding="utf-8")


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 5, logging.CRITICAL),
        (1, 1, logging.WARNING),
    ],
)
def test_console_level_from_verbosity(verbose, quiet, expected):
    """Each -v/-q moves one level from WARNING, clamped to DEBUG..CRITICAL."""
    assert LoggingSettings(verbose=verbose, quiet=quiet).console_level == expected


def test_records_to_file_needs_a_path(tmp_path):
    """The flight recorder is only attached when enabled and given a path."""
    assert not LoggingSettings(flight_recorder=True).records_to_file
    assert not LoggingSettings(log_path=tmp_path / "x.log").records_to_file
    assert LoggingSettings(flight_recorder=True, log_path=tmp_path / "x.log").records_to_file


@pytest.fixture
def restore_root_logger():
    """Put the root logger's handlers and level back after the test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_configure_logging(restore_root_logger, tmp_path):
    """Handlers land on the root logger and per-logger levels are applied."""
    settings = LoggingSettings(
        verbose=1,
        log_path=tmp_path / "latest.log",
        flight_recorder=True,
        logger_levels={"sundries.tests.noisy": logging.ERROR},
    )
    handlers = configure_logging(settings)

    assert [type(h) for h in handlers] == [RichHandler, MemoryHandler]
    assert restore_root_logger.handlers == handlers
    assert restore_root_logger.level == logging.DEBUG
    assert handlers[0].level == logging.INFO
    assert logging.getLogger("sundries.tests.noisy").level == logging.ERROR
    logging.getLogger("sundries.tests.noisy").setLevel(logging.NOTSET)


def test_log_startup(caplog, tmp_path):
    """The summary line carries version, console level and recorder state."""
    logger = logging.getLogger("sundries.tests.startup")
    settings = LoggingSettings(
        log_path=tmp_path / "latest.log",
        flight_recorder=True,
        logger_levels={"asyncio": logging.WARNING},
    )
    with caplog.at_level(logging.DEBUG, logger="sundries.tests.startup"):
        log_startup(logger, settings, [logging.NullHandler()], "1.2.3")

    assert "SUNDRIES 1.2.3: console=WARNING, flight-recorder=ON" in caplog.messages
    assert "Handlers: ['NullHandler']" in caplog.messages
    assert any(m.endswith("capacity=2000, flush_on_close=False") for m in caplog.messages)
    assert "Per-logger overrides: {'asyncio': 'WARNING'}" in caplog.messages
