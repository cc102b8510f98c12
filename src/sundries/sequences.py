"""Sequence, collection and mapping helpers.

Helpers that only need to walk their input once accept any iterable and are
lazy where that is natural (`distinct_by`, `except_value`, `slice_items`,
`group_contiguous`). Helpers that need to look at the end of the input
buffer it into a list first.
"""

from __future__ import annotations

import enum
from collections.abc import (
    Callable,
    Iterable,
    Iterator,
    MutableMapping,
    MutableSequence,
    MutableSet,
    Sequence,
)
from itertools import islice
from typing import Any, TypeVar

from sundries.comparers import KeyComparer, resolve
from sundries.errors import EmptySequenceError
from sundries.utils import random_source
from sundries.utils.guards import guard_not_negative, guard_not_none

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

_MISSING: Any = object()


class EnsureMaxCountMode(enum.Enum):
    """How `ensure_max_count` makes room in a full sequence."""

    DELETE_FIRST = "delete_first"
    DELETE_LAST = "delete_last"
    DELETE_RANDOM = "delete_random"
    DELETE_ALL = "delete_all"


def _as_sequence(items: Iterable[T]) -> Sequence[T]:
    return items if isinstance(items, Sequence) else list(items)


# ============================================================================
#                         Null handling and hashing
# ============================================================================


def is_none_or_empty(items: Iterable[Any] | None) -> bool:
    """Return True if `items` is None or yields no elements.

    Note:
        For one-shot iterators this consumes the first element.
    """
    if items is None:
        return True
    return next(iter(items), _MISSING) is _MISSING


def empty_if_none(items: Iterable[T] | None) -> Iterable[T]:
    """Return `items`, or an empty tuple when `items` is None."""
    return () if items is None else items


def sequence_hash(items: Iterable[Any], ignore_order: bool = False) -> int:
    """Aggregate the hashes of all elements into a single 32-bit hash.

    Uses the classic ``result = result * 31 + hash`` fold seeded with 19.
    None elements hash as 0. With `ignore_order`, element hashes are sorted
    first so any permutation of the same elements hashes identically.
    """
    guard_not_none(items, "items")
    hashes = [0 if item is None else hash(item) for item in items]
    if ignore_order:
        hashes.sort()

    result = 19
    for h in hashes:
        result = (result * 31 + h) & 0xFFFFFFFF
    # reinterpret as signed 32-bit
    return result - (1 << 32) if result & 0x80000000 else result


# ============================================================================
#                              Random sampling
# ============================================================================


def random_element(items: Iterable[T]) -> T:
    """Return a uniformly chosen element of `items`.

    Raises:
        EmptySequenceError: If `items` is empty.
    """
    buffered = _as_sequence(guard_not_none(items, "items"))
    if not buffered:
        raise EmptySequenceError()
    return buffered[random_source.get_int(0, len(buffered))]


def random_element_or_default(items: Iterable[T], default: T | None = None) -> T | None:
    """Return a uniformly chosen element of `items`, or `default` if empty."""
    buffered = _as_sequence(guard_not_none(items, "items"))
    if not buffered:
        return default
    return buffered[random_source.get_int(0, len(buffered))]


# ============================================================================
#                               Filtering
# ============================================================================


def distinct_by(
    items: Iterable[T],
    key: Callable[[T], K],
    comparer: KeyComparer[K] | None = None,
) -> Iterator[T]:
    """Yield the first element for each distinct key, preserving order.

    Args:
        items: Source elements.
        key: Function deriving the comparison key of an element.
        comparer: How keys are compared; defaults to ``==`` / `hash`.

    Examples:
        >>> list(distinct_by(["apple", "avocado", "banana"], lambda s: s[0]))
        ['apple', 'banana']
    """
    guard_not_none(items, "items")
    guard_not_none(key, "key")
    key_comparer = resolve(comparer)
    seen: set[Any] = set()
    for item in items:
        wrapped = key_comparer.wrap(key(item))
        if wrapped not in seen:
            seen.add(wrapped)
            yield item


def except_value(
    items: Iterable[T], value: T, comparer: KeyComparer[T] | None = None
) -> Iterator[T]:
    """Yield the elements of `items` that are not equal to `value`."""
    guard_not_none(items, "items")
    equals = resolve(comparer).equals
    return (item for item in items if not equals(item, value))


def except_none(items: Iterable[T | None]) -> Iterator[T]:
    """Yield the elements of `items` that are not None."""
    return (item for item in items if item is not None)


# ============================================================================
#                                 Slicing
# ============================================================================


def slice_items(items: Iterable[T], start: int, count: int) -> Iterator[T]:
    """Yield at most `count` elements of `items`, starting at index `start`."""
    guard_not_none(items, "items")
    guard_not_negative(start, "start")
    guard_not_negative(count, "count")
    return islice(items, start, start + count)


def take_last(items: Iterable[T], count: int) -> list[T]:
    """Return the last `count` elements of `items`."""
    guard_not_negative(count, "count")
    buffered = list(items)
    return buffered[max(len(buffered) - count, 0) :] if count else []


def skip_last(items: Iterable[T], count: int) -> list[T]:
    """Return all but the last `count` elements of `items`."""
    guard_not_negative(count, "count")
    buffered = list(items)
    return buffered[: len(buffered) - count] if count < len(buffered) else []


def take_last_while(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the longest suffix of `items` whose elements all satisfy `predicate`."""
    buffered = list(items)
    i = len(buffered)
    while i > 0 and predicate(buffered[i - 1]):
        i -= 1
    return buffered[i:]


def skip_last_while(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return `items` without the longest suffix satisfying `predicate`."""
    buffered = list(items)
    i = len(buffered)
    while i > 0 and predicate(buffered[i - 1]):
        i -= 1
    return buffered[:i]


# ============================================================================
#                                Searching
# ============================================================================


def _matcher(
    target: T | Callable[[T], bool], comparer: KeyComparer[T] | None
) -> Callable[[T], bool]:
    if callable(target) and comparer is None:
        return target  # type: ignore[return-value]
    equals = resolve(comparer).equals
    return lambda item: equals(item, target)  # type: ignore[arg-type]


def index_of(
    items: Iterable[T],
    target: T | Callable[[T], bool],
    comparer: KeyComparer[T] | None = None,
) -> int:
    """Return the index of the first matching element, or -1.

    `target` is either a predicate or a value compared with `comparer`. A
    callable is treated as a predicate unless a comparer is given.
    """
    matches = _matcher(target, comparer)
    for i, item in enumerate(items):
        if matches(item):
            return i
    return -1


def last_index_of(
    items: Iterable[T],
    target: T | Callable[[T], bool],
    comparer: KeyComparer[T] | None = None,
) -> int:
    """Return the index of the last matching element, or -1."""
    matches = _matcher(target, comparer)
    buffered = _as_sequence(items)
    for i in range(len(buffered) - 1, -1, -1):
        if matches(buffered[i]):
            return i
    return -1


# ============================================================================
#                                Grouping
# ============================================================================


def group_contiguous(
    items: Iterable[T], predicate: Callable[[list[T], T], bool]
) -> Iterator[list[T]]:
    """Group contiguous elements into lists.

    The predicate decides whether the next element joins the current group.
    It receives the current group and the candidate element. When it returns
    False the current group is yielded and a new group starting with the
    candidate is opened.

    Examples:
        >>> list(group_contiguous([1, 2, 3, 4, 5], lambda group, _: len(group) < 2))
        [[1, 2], [3, 4], [5]]
    """
    guard_not_none(items, "items")
    guard_not_none(predicate, "predicate")
    group: list[T] = []
    for item in items:
        if group and not predicate(group, item):
            yield group
            group = []
        group.append(item)
    if group:
        yield group


# ============================================================================
#                           Collections and mappings
# ============================================================================


def add_range(
    collection: MutableSet[T] | MutableSequence[T], items: Iterable[T]
) -> int:
    """Add every element of `items` to `collection`.

    Returns:
        The number of elements actually added. For sets, elements already
        present do not count.
    """
    guard_not_none(collection, "collection")
    added = 0
    if isinstance(collection, MutableSet):
        for item in items:
            if item not in collection:
                collection.add(item)
                added += 1
        return added
    for item in items:
        collection.append(item)
        added += 1
    return added


def to_set(items: Iterable[T], comparer: KeyComparer[T] | None = None) -> list[T]:
    """Return the distinct elements of `items` in first-seen order.

    Unlike `set`, equality is decided by `comparer`, so unhashable elements
    work as long as the comparer can hash them.
    """
    return list(distinct_by(items, lambda item: item, comparer))


def get_or_default(
    mapping: MutableMapping[K, V], key: K, default: V | None = None
) -> V | None:
    """Return ``mapping[key]``, or `default` when the key is absent."""
    guard_not_none(mapping, "mapping")
    return mapping[key] if key in mapping else default


def set_or_add(mapping: MutableMapping[K, V], key: K, value: V) -> bool:
    """Set ``mapping[key] = value``.

    Returns:
        True if the key was new, False if an existing value was overwritten.
    """
    guard_not_none(mapping, "mapping")
    is_new = key not in mapping
    mapping[key] = value
    return is_new


def fill(seq: MutableSequence[T], value: T, start: int = 0, count: int | None = None) -> None:
    """Overwrite `count` elements of `seq` with `value`, starting at `start`.

    `count` defaults to the rest of the sequence.
    """
    guard_not_negative(start, "start")
    if count is None:
        count = max(len(seq) - start, 0)
    guard_not_negative(count, "count")
    for i in range(start, min(start + count, len(seq))):
        seq[i] = value


def ensure_max_count(
    seq: MutableSequence[T],
    count: int,
    mode: EnsureMaxCountMode = EnsureMaxCountMode.DELETE_FIRST,
) -> None:
    """Remove elements until ``len(seq) <= count``.

    Args:
        seq: The sequence to shrink in place.
        count: Maximum number of elements to keep.
        mode: Which elements to remove. `DELETE_ALL` clears the sequence as
            soon as it exceeds `count`.
    """
    guard_not_negative(count, "count")
    if len(seq) <= count:
        return
    if mode is EnsureMaxCountMode.DELETE_ALL:
        seq.clear()
        return
    while len(seq) > count:
        if mode is EnsureMaxCountMode.DELETE_FIRST:
            del seq[0]
        elif mode is EnsureMaxCountMode.DELETE_LAST:
            del seq[-1]
        else:
            del seq[random_source.get_int(0, len(seq))]
