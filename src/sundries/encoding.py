"""Text encoding and base64 helpers.

When no encoding is given, the configured default is used (UTF-16LE unless
``SUNDRIES_DEFAULT_ENCODING`` says otherwise).
"""

from __future__ import annotations

import base64
import binascii

from sundries.config import get_default_encoding
from sundries.errors import InvalidArgumentError
from sundries.utils.guards import guard_not_none


def get_bytes(s: str, encoding: str | None = None) -> bytes:
    """Encode `s` with `encoding` (or the configured default)."""
    guard_not_none(s, "s")
    return s.encode(encoding or get_default_encoding())


def get_string(data: bytes, encoding: str | None = None) -> str:
    """Decode `data` with `encoding` (or the configured default)."""
    guard_not_none(data, "data")
    return data.decode(encoding or get_default_encoding())


def to_base64(data: bytes) -> str:
    """Return the standard base64 text of `data`."""
    return base64.b64encode(guard_not_none(data, "data")).decode("ascii")


def from_base64(text: str) -> bytes:
    """Decode standard base64 text.

    Raises:
        InvalidArgumentError: If `text` is not valid base64.
    """
    guard_not_none(text, "text")
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise InvalidArgumentError("text", text, "not valid base64") from e
