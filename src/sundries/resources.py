"""Reading text resources packaged alongside Python modules."""

from __future__ import annotations

import logging
from importlib.resources import files

from sundries.errors import ResourceNotFoundError
from sundries.utils.guards import guard_not_empty

logger = logging.getLogger(__name__)


def read_resource_text(package: str, name: str, encoding: str = "utf-8") -> str:
    """Read a packaged resource as text.

    Args:
        package: Dotted name of the package that ships the resource.
        name: Resource path relative to the package, ``/``-separated.
        encoding: Text encoding of the resource.

    Returns:
        The resource contents.

    Raises:
        ResourceNotFoundError: If the package or the resource doesn't exist.
    """
    guard_not_empty(package, "package")
    guard_not_empty(name, "name")
    try:
        resource = files(package).joinpath(*name.split("/"))
    except ModuleNotFoundError as e:
        raise ResourceNotFoundError(package, name) from e
    if not resource.is_file():
        raise ResourceNotFoundError(package, name)
    logger.debug("Reading resource %s from %s", name, package)
    return resource.read_text(encoding=encoding)
