"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits structured log
messages, plus fixtures to register that command, obtain a CliRunner, and
run tests within an isolated filesystem. Every item collected here gets the
`e2e` mark.
"""

import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from sundries.config import LOG_PATH_ENV
from sundries.entrypoints.cli.main import sundries

# pylint: disable=redefined-outer-name, unused-argument

E2E_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the `e2e` mark to every item collected below this directory."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents and not item.get_closest_marker("e2e"):
            item.add_marker(pytest.mark.e2e)


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'sundries.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("sundries.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `sundries` for the duration of a test."""
    sundries.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(sundries, "log-demo")


@pytest.fixture
def runner():
    """Return a CliRunner whose flight recorder writes inside the isolated filesystem."""
    return CliRunner(env={LOG_PATH_ENV: "latest.log"})


@pytest.fixture
def fs(runner):
    """Run the test inside `runner.isolated_filesystem()`."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, fs):
    """Invoke `sundries` with the given arguments and return the Click result."""

    def _invoke(*args: str, **kwargs):
        return runner.invoke(sundries, list(args), **kwargs)

    return _invoke
