"""Configuration utilities for SUNDRIES.

This module centralizes constants and the few environment lookups the
library and its CLI honour.
"""

import codecs
import os

from sundries.errors import UnknownEncodingError

PROJECT_NAME = "sundries"  # pragma: no mutate

DEFAULT_ENCODING_ENV = "SUNDRIES_DEFAULT_ENCODING"  # pragma: no mutate
LOG_PATH_ENV = "SUNDRIES_LOG_PATH"  # pragma: no mutate
LOGGER_LEVELS_ENV = "SUNDRIES_LOGGER_LEVELS"  # pragma: no mutate
FLIGHT_RECORDER_CAPACITY_ENV = "SUNDRIES_FLIGHT_RECORDER_CAPACITY"  # pragma: no mutate

# UTF-16 little endian, the "Unicode" encoding of the byte helpers.
FALLBACK_ENCODING = "utf-16-le"


def get_default_encoding() -> str:
    """Get the text encoding used when a byte helper is called without one.

    Returns:
        The normalized codec name from `SUNDRIES_DEFAULT_ENCODING`, or
        `utf-16-le` when the variable is unset or empty.

    Raises:
        UnknownEncodingError: If the variable names a codec Python doesn't know.
    """
    if not (name := os.environ.get(DEFAULT_ENCODING_ENV)):
        return FALLBACK_ENCODING
    try:
        return codecs.lookup(name).name
    except LookupError as e:
        raise UnknownEncodingError(name) from e
