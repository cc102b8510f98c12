"""Miscellaneous helpers."""

from __future__ import annotations

from typing import TypeVar

from sundries.comparers import KeyComparer, resolve

T = TypeVar("T")


def is_either(obj: T, *variants: T, comparer: KeyComparer[T] | None = None) -> bool:
    """Return True if `obj` equals any of `variants`.

    Examples:
        >>> is_either("b", "a", "b", "c")
        True
    """
    equals = resolve(comparer).equals
    return any(equals(obj, variant) for variant in variants)
