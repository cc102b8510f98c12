"""Argument guards.

Each guard returns its argument unchanged when it passes, so guards can be
used inline, and raises `InvalidArgumentError` otherwise.
"""

from typing import TypeVar

from sundries.errors import InvalidArgumentError

T = TypeVar("T")


def guard_not_none(value: T | None, name: str) -> T:
    """Return `value` unless it is None."""
    if value is None:
        raise InvalidArgumentError(name, value, "cannot be None")
    return value


def guard_not_empty(value: str | None, name: str) -> str:
    """Return `value` unless it is None or the empty string."""
    if not guard_not_none(value, name):
        raise InvalidArgumentError(name, value, "cannot be empty")
    return value


def guard_not_negative(value: int, name: str) -> int:
    """Return `value` unless it is negative."""
    if value < 0:
        raise InvalidArgumentError(name, value, "cannot be negative")
    return value
