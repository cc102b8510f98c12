"""Numeric helpers: clamping, range checks and random draws."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from sundries.errors import InvalidArgumentError
from sundries.utils import random_source
from sundries.utils.guards import guard_not_negative, guard_not_none


class SupportsOrdering(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...
    def __le__(self, other: Any, /) -> bool: ...


C = TypeVar("C", bound=SupportsOrdering)


def clamp(value: C, lo: C, hi: C) -> C:
    """Clamp `value` to the inclusive range ``[lo, hi]``.

    Raises:
        InvalidArgumentError: If `hi` is less than `lo`.
    """
    guard_not_none(value, "value")
    if hi < lo:
        raise InvalidArgumentError("hi", hi, "must be greater than or equal to lo")
    return clamp_max(clamp_min(value, lo), hi)


def clamp_min(value: C, lo: C) -> C:
    """Return `lo` if `value` is below it, otherwise `value`."""
    return lo if value <= lo else value


def clamp_max(value: C, hi: C) -> C:
    """Return `hi` if `value` is above it, otherwise `value`."""
    return hi if hi <= value else value


def is_in_range(value: C, lo: C, hi: C) -> bool:
    """Return True if ``lo <= value <= hi``."""
    return lo <= value <= hi


def random_int(lo: int = 0, hi: int = 2**31 - 1) -> int:
    """Return a random integer in ``[lo, hi)``."""
    if hi <= lo:
        raise InvalidArgumentError("hi", hi, "must be greater than lo")
    return random_source.get_int(lo, hi)


def random_float(lo: float = 0.0, hi: float = 1.0) -> float:
    """Return a random float in ``[lo, hi)``."""
    if hi < lo:
        raise InvalidArgumentError("hi", hi, "must be greater than or equal to lo")
    return lo + (hi - lo) * random_source.get_float()


def random_bool(probability: float = 0.5) -> bool:
    """Return True with the given probability."""
    if not 0.0 <= probability <= 1.0:
        raise InvalidArgumentError("probability", probability, "must be within [0, 1]")
    return random_source.get_float() < probability


def random_bytes(count: int) -> bytes:
    """Return `count` random bytes (not suitable for secrets)."""
    return random_source.get_bytes(guard_not_negative(count, "count"))
