"""SUNDRIES URI commands.

Each command prints the resulting URI on stdout. Invalid input is reported
as a Click error (exit status 1).
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urlunsplit

import click
import click_extra as clickx

from sundries import uri as uri_ops
from sundries.errors import SundriesError

from .helpers import warn

logger = logging.getLogger(__name__)


def _count_query_keys(uri: str, key: str) -> int:
    query = uri.split("#", 1)[0].partition("?")[2]
    return len(re.findall(rf"(?:^|&){re.escape(key)}(?=[=&]|$)", query))


@click.group(cls=clickx.ExtraGroup)
def uri() -> None:
    """Resolve URIs and rewrite their parameters."""


@uri.command()
@click.argument("target")
@click.option("--base", help="Base URI to resolve TARGET against.")
def resolve(target: str, base: str | None) -> None:
    """Print TARGET as a canonical absolute URI."""
    try:
        click.echo(urlunsplit(uri_ops.to_uri(target, base)))
    except SundriesError as e:
        raise click.ClickException(str(e)) from e


@uri.command("set-query")
@click.argument("target")
@click.argument("key")
@click.argument("value", required=False)
def set_query(target: str, key: str, value: str | None) -> None:
    """Set query parameter KEY of TARGET to VALUE (empty when omitted)."""
    try:
        result = uri_ops.set_query_parameter(target, key, value)
    except SundriesError as e:
        raise click.ClickException(str(e)) from e
    if (count := _count_query_keys(target, key)) > 1:
        warn(f"Key '{key}' occurs {count} times; only the first was rewritten.")
    logger.info("Set query parameter %s", key)
    click.echo(result)


@uri.command("set-route")
@click.argument("target")
@click.argument("key")
@click.argument("value", required=False)
def set_route(target: str, key: str, value: str | None) -> None:
    """Set route segment pair /KEY/VALUE of TARGET (VALUE empty when omitted)."""
    try:
        result = uri_ops.set_route_parameter(target, key, value)
    except SundriesError as e:
        raise click.ClickException(str(e)) from e
    logger.info("Set route parameter %s", key)
    click.echo(result)
