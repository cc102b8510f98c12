"""Process-wide random source shared by the sampling helpers.

A single `random.Random` instance is guarded by a lock so concurrent callers
never interleave state updates.
"""

import random
import threading

_random = random.Random()
_lock = threading.Lock()


def get_int(inclusive_min: int = 0, exclusive_max: int = 2**31 - 1) -> int:
    """Return a random integer in ``[inclusive_min, exclusive_max)``."""
    with _lock:
        return _random.randrange(inclusive_min, exclusive_max)


def get_float() -> float:
    """Return a random float in ``[0.0, 1.0)``."""
    with _lock:
        return _random.random()


def get_bytes(count: int) -> bytes:
    """Return ``count`` random bytes."""
    with _lock:
        return _random.randbytes(count)


def seed(value: int | None = None) -> None:
    """Reseed the shared source (tests use this for reproducibility)."""
    with _lock:
        _random.seed(value)
