"""Equality comparers expressed as function pairs.

A `KeyComparer` bundles an equality function with a matching hash function.
Helpers that deduplicate or search accept one wherever plain ``==`` is not
what the caller wants, without requiring a dedicated comparer class per case.

Invariant: ``equals(a, b)`` implies ``hash(a) == hash(b)``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _default_hash(value: Any) -> int:
    return 0 if value is None else hash(value)


@dataclass(frozen=True, slots=True)
class KeyComparer(Generic[T]):
    """An (equality, hash) function pair."""

    equals: Callable[[T, T], bool]
    hash: Callable[[T], int]

    @classmethod
    def default(cls) -> KeyComparer[Any]:
        """Compare with ``==`` and the built-in `hash` (None hashes as 0)."""
        return cls(equals=lambda a, b: a == b, hash=_default_hash)

    @classmethod
    def by(cls, key: Callable[[T], Any]) -> KeyComparer[T]:
        """Compare values by a derived key.

        Examples:
            >>> by_len = KeyComparer.by(len)
            >>> by_len.equals("ab", "cd")
            True
        """
        return cls(
            equals=lambda a, b: key(a) == key(b),
            hash=lambda value: _default_hash(key(value)),
        )

    def wrap(self, value: T) -> _Keyed[T]:
        """Wrap `value` so built-in sets and dicts use this comparer."""
        return _Keyed(value, self)


class _Keyed(Generic[T]):
    """Hashable wrapper delegating ``==`` and `hash` to a `KeyComparer`."""

    __slots__ = ("value", "comparer")

    def __init__(self, value: T, comparer: KeyComparer[T]) -> None:
        self.value = value
        self.comparer = comparer

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Keyed):
            return NotImplemented
        return self.comparer.equals(self.value, other.value)

    def __hash__(self) -> int:
        return self.comparer.hash(self.value)


def casefold_comparer() -> KeyComparer[str]:
    """Return a comparer for case-insensitive string comparison."""
    return KeyComparer.by(str.casefold)


def resolve(comparer: KeyComparer[T] | None) -> KeyComparer[T]:
    """Return `comparer`, or the default comparer when it is None."""
    return comparer if comparer is not None else KeyComparer.default()


