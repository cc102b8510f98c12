"""SUNDRIES CLI entry point.

Defines the top-level ``sundries`` command (via Click-Extra). The group only
sets up logging; the work happens in its subcommand groups:

- ``sundries uri``: resolve URIs and rewrite query/route parameters.
- ``sundries xml``: strip namespaces from XML documents.

Examples
    $ sundries uri set-query "http://test.com/?a=b" a x
    $ sundries -v xml strip-namespaces feed.xml
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from sundries import __version__
from sundries.config import (
    FLIGHT_RECORDER_CAPACITY_ENV,
    LOG_PATH_ENV,
    LOGGER_LEVELS_ENV,
    PROJECT_NAME,
)
from sundries.logging import (
    DEFAULT_FLIGHT_RECORDER_CAPACITY,
    LoggingSettings,
    configure_logging,
    log_startup,
)

from .helpers import parse_log_level
from .uri import uri as uri_group
from .xml import xml as xml_group

logger = logging.getLogger(__name__)


HELP = """Rewrite URIs and clean up XML from the command line.

    Results are printed on stdout. Logs and warnings go to stderr, and a
    flight recorder keeps recent DEBUG records so a failing run can be
    inspected afterwards (see --log-path).
    """


def _default_log_path() -> Path:
    return Path(user_log_dir(PROJECT_NAME, appauthor=False, ensure_exists=True)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Show more log output (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    count=True,
    help="Show less log output (-q for ERROR, -qq for CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=_default_log_path,
    envvar=LOG_PATH_ENV,
    show_default="user log directory/latest.log",
    show_envvar=True,
    help="File the flight recorder writes to (truncated on each run).",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_FLIGHT_RECORDER_CAPACITY,
    envvar=FLIGHT_RECORDER_CAPACITY_ENV,
    hidden=True,
    help="Number of log records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    help="Buffer DEBUG records and write them to --log-path on the first WARNING.",
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    show_default=True,
    help="Also write the flight recorder buffer when the command exits.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=LOGGER_LEVELS_ENV,
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL. Repeatable "
        "(-L asyncio=INFO -L sundries.uri=DEBUG); the environment variable "
        "takes a comma or space separated list."
    ),
)
@clickx.pass_context
def sundries(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """Rewrite URIs and clean up XML from the command line."""
    settings = LoggingSettings(
        verbose=verbose,
        quiet=quiet,
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers, __version__)

    # flushes (if forced) and closes the flight recorder after the subcommand
    ctx.call_on_close(logging.shutdown)


sundries.add_command(uri_group)
sundries.add_command(xml_group)
