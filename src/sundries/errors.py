"""Error definitions shared by every SUNDRIES helper module."""

from typing import Any

# ============================================================================
#                              General errors
# ============================================================================


class SundriesError(Exception):
    """Base class for all SUNDRIES errors."""


class InvalidArgumentError(SundriesError, ValueError):
    """Raised when a required argument is missing or outside its domain."""

    def __init__(self, name: str, value: Any = None, reason: str | None = None) -> None:
        message = f"Invalid argument '{name}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.name = name
        self.value = value
        self.reason = reason


class EmptySequenceError(SundriesError, LookupError):
    """Raised when an operation requires at least one element."""

    def __init__(self) -> None:
        super().__init__("Sequence contains no elements.")


class UnknownEncodingError(SundriesError, LookupError):
    """Raised when a configured text encoding is not known to Python."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unknown text encoding '{encoding}'.")
        self.encoding = encoding


# ============================================================================
#                               URI errors
# ============================================================================


class MalformedUriError(SundriesError, ValueError):
    """Raised when a string cannot be parsed as a URI."""

    def __init__(self, uri: str, reason: str | None = None) -> None:
        message = f"Malformed URI '{uri}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.uri = uri
        self.reason = reason


# ============================================================================
#                               XML errors
# ============================================================================


class XmlElementNotFoundError(SundriesError, LookupError):
    """Raised when a required XML element is absent."""

    def __init__(self, parent: str, name: str) -> None:
        super().__init__(f"Element <{parent}> has no child element <{name}>.")
        self.parent = parent
        self.name = name


class XmlAttributeNotFoundError(SundriesError, LookupError):
    """Raised when a required XML attribute is absent."""

    def __init__(self, element: str, name: str) -> None:
        super().__init__(f"Element <{element}> has no attribute '{name}'.")
        self.element = element
        self.name = name


# ============================================================================
#                             Resource errors
# ============================================================================


class ResourceNotFoundError(SundriesError, FileNotFoundError):
    """Raised when a packaged resource does not exist."""

    def __init__(self, package: str, name: str) -> None:
        super().__init__(f"Resource [{name}] doesn't exist in package '{package}'.")
        self.package = package
        self.name = name
