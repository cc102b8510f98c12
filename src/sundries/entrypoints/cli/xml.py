"""SUNDRIES XML commands."""

from __future__ import annotations

import logging
from typing import BinaryIO
from xml.etree import ElementTree

import click
import click_extra as clickx

from sundries.xml import strip_namespaces as strip

from .helpers import error

logger = logging.getLogger(__name__)


@click.group(cls=clickx.ExtraGroup)
def xml() -> None:
    """Transform XML documents."""


@xml.command("strip-namespaces")
@click.argument("source", type=click.File("rb"), default="-")
@click.pass_context
def strip_namespaces(ctx: click.Context, source: BinaryIO) -> None:
    """Print SOURCE (a file, or stdin when '-') without XML namespaces."""
    try:
        root = ElementTree.parse(source).getroot()
    except ElementTree.ParseError as e:
        error(f"Cannot parse {source.name}: {e}")
        ctx.exit(1)
    logger.debug("Stripping namespaces from <%s>", root.tag)
    click.echo(ElementTree.tostring(strip(root), encoding="unicode"))
