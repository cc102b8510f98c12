"""Logging setup for the SUNDRIES command line.

Library modules only call ``logging.getLogger(__name__)``. Handlers are
attached here, and only when the ``sundries`` command starts:

- a Rich console handler on stderr, so stdout carries nothing but results;
- an optional "flight recorder", a memory buffer of DEBUG records that is
  written to a file once something goes wrong (WARNING or worse), or on exit
  when forced.

`LoggingSettings` collects what the command-line options decide, and
`configure_logging` turns it into handlers on the root logger.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from sundries.config import PROJECT_NAME

# pylint: disable=too-few-public-methods

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

BASE_LEVEL = logging.WARNING
DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000  # pragma: no mutate

CONSOLE_FORMAT = "%(prefix)s%(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


@dataclass(frozen=True)
class LoggingSettings:
    """Logging choices made on the command line.

    Attributes:
        verbose: Number of ``-v`` flags; each lowers the console threshold one level.
        quiet: Number of ``-q`` flags; each raises it one level.
        debug: Force DEBUG on the console and show source locations.
        color: Allow ANSI colors on the console.
        log_path: File the flight recorder writes to.
        flight_recorder: Whether to attach the flight recorder at all.
        capacity: Records the flight recorder keeps in memory.
        force_flush: Write the flight recorder buffer on exit even without a WARNING.
        logger_levels: Minimum level per logger name.
    """

    verbose: int = 0
    quiet: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = False
    capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """WARNING shifted by verbosity, kept within DEBUG..CRITICAL."""
        level = BASE_LEVEL - 10 * self.verbose + 10 * self.quiet
        return max(logging.DEBUG, min(logging.CRITICAL, level))

    @property
    def records_to_file(self) -> bool:
        """True when a flight recorder with a destination is requested."""
        return self.flight_recorder and self.log_path is not None


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from loggers outside SUNDRIES with ``[top-level-name] ``.

    SUNDRIES records get an empty prefix. Nothing is ever filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".", 1)[0]
        record.prefix = "" if top == PROJECT_NAME else f"[{top}] "
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a `RichHandler` that writes to stderr.

    In debug mode the level is forced to DEBUG and records show timestamps,
    logger names and source paths; otherwise third-party records are prefixed
    with their top-level package name.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a memory buffer that dumps its records into `path`.

    The buffer keeps up to `capacity` records at any level and hands them to
    a file handler when a record at `flush_level` arrives, when it is full,
    or on close if `flush_on_close` is set. The file is truncated on first
    write and not created before.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity, flushLevel=flush_level, target=target, flushOnClose=flush_on_close
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Replace the root logger's handlers according to `settings`.

    The root logger is opened to DEBUG so each handler applies its own
    threshold; per-logger levels from `settings.logger_levels` are applied on
    top.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=settings.console_level,
            debug_mode=settings.debug,
            color=settings.color,
        )
    ]
    if settings.records_to_file:
        handlers.append(
            config_flight_recorder(
                settings.log_path,  # type: ignore[arg-type]
                capacity=settings.capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log a one-line INFO summary, then DEBUG diagnostics for bug reports."""
    logger.info(
        "SUNDRIES %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.records_to_file else "OFF",
    )

    diagnostics = {
        "Python": sys.version.split()[0],
        "Platform": f"{platform.system()} {platform.release()}",
        "PID": os.getpid(),
        "CWD": Path.cwd(),
        "Handlers": [type(h).__name__ for h in handlers],
    }
    for key, value in diagnostics.items():
        logger.debug("%s: %s", key, value)

    if settings.records_to_file:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.capacity,
            settings.force_flush,
        )
    if settings.logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()},
        )
