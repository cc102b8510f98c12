"""String helpers.

Substring searches accept an ``ignore_case`` flag. Case-insensitive matching
compares `str.casefold` forms and assumes casefolding keeps the string length
(true for everything outside a handful of ligatures such as "ß").
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from sundries.errors import InvalidArgumentError
from sundries.utils.guards import guard_not_empty, guard_not_negative, guard_not_none

# ============================================================================
#                               Predicates
# ============================================================================


def is_none_or_empty(s: str | None) -> bool:
    """Return True if `s` is None or the empty string."""
    return not s


def is_blank(s: str | None) -> bool:
    """Return True if `s` is None, empty, or whitespace only."""
    return s is None or not s.strip()


def is_not_blank(s: str | None) -> bool:
    """Return True if `s` has at least one non-whitespace character."""
    return not is_blank(s)


def empty_if_none(s: str | None) -> str:
    """Return `s`, or the empty string when `s` is None."""
    return "" if s is None else s


def is_numeric(s: str) -> bool:
    """Return True if every character of `s` is a decimal digit."""
    return all(c.isdigit() for c in s)


def is_alphabetic(s: str) -> bool:
    """Return True if every character of `s` is a letter."""
    return all(c.isalpha() for c in s)


def is_alphanumeric(s: str) -> bool:
    """Return True if every character of `s` is a letter or a digit."""
    return all(c.isalnum() for c in s)


# ============================================================================
#                                Searching
# ============================================================================


def _fold(s: str, ignore_case: bool) -> str:
    return s.casefold() if ignore_case else s


def _find(s: str, sub: str, ignore_case: bool, start: int = 0) -> int:
    return _fold(s, ignore_case).find(_fold(sub, ignore_case), start)


def _rfind(s: str, sub: str, ignore_case: bool) -> int:
    return _fold(s, ignore_case).rfind(_fold(sub, ignore_case))


def substring_until(s: str, sub: str, ignore_case: bool = False) -> str:
    """Return the part of `s` before the first `sub`, or all of `s` if absent."""
    index = _find(s, sub, ignore_case)
    return s if index < 0 else s[:index]


def substring_after(s: str, sub: str, ignore_case: bool = False) -> str:
    """Return the part of `s` after the first `sub`, or "" if absent."""
    index = _find(s, sub, ignore_case)
    return "" if index < 0 else s[index + len(sub) :]


def substring_until_last(s: str, sub: str, ignore_case: bool = False) -> str:
    """Return the part of `s` before the last `sub`, or all of `s` if absent."""
    index = _rfind(s, sub, ignore_case)
    return s if index < 0 else s[:index]


def substring_after_last(s: str, sub: str, ignore_case: bool = False) -> str:
    """Return the part of `s` after the last `sub`, or "" if absent."""
    index = _rfind(s, sub, ignore_case)
    return "" if index < 0 else s[index + len(sub) :]


# ============================================================================
#                              Transformations
# ============================================================================


def trim_start(s: str, sub: str, ignore_case: bool = False) -> str:
    """Remove every leading occurrence of `sub` from `s`.

    Examples:
        >>> trim_start("tetetetest", "te")
        'st'
    """
    guard_not_empty(sub, "sub")
    folded_sub = _fold(sub, ignore_case)
    while _fold(s[: len(sub)], ignore_case) == folded_sub:
        s = s[len(sub) :]
    return s


def trim_end(s: str, sub: str, ignore_case: bool = False) -> str:
    """Remove every trailing occurrence of `sub` from `s`."""
    guard_not_empty(sub, "sub")
    folded_sub = _fold(sub, ignore_case)
    while len(s) >= len(sub) and _fold(s[-len(sub) :], ignore_case) == folded_sub:
        s = s[: -len(sub)]
    return s


def trim(s: str, sub: str, ignore_case: bool = False) -> str:
    """Remove every leading and trailing occurrence of `sub` from `s`."""
    return trim_end(trim_start(s, sub, ignore_case), sub, ignore_case)


def reverse(s: str) -> str:
    """Return `s` with its characters in reverse order."""
    return s[::-1]


def repeat(s: str, count: int) -> str:
    """Return `s` repeated `count` times."""
    return s * guard_not_negative(count, "count")


def replace(s: str, old: str, new: str, ignore_case: bool = False) -> str:
    """Replace every occurrence of `old` in `s` with `new`.

    Occurrences are found in a single left-to-right pass; text inserted by a
    replacement is never searched again.

    Args:
        s: The string to search.
        old: The substring to replace; must not be empty.
        new: The replacement text.
        ignore_case: Match `old` case-insensitively.

    Returns:
        The rewritten string.
    """
    guard_not_empty(old, "old")
    if not ignore_case:
        return s.replace(old, new)
    return re.sub(re.escape(old), lambda _: new, s, flags=re.IGNORECASE)


def ensure_starts_with(s: str, start: str) -> str:
    """Return `s`, prefixed with `start` unless it already starts with it."""
    return s if s.startswith(start) else start + s


def ensure_ends_with(s: str, end: str) -> str:
    """Return `s`, suffixed with `end` unless it already ends with it."""
    return s if s.endswith(end) else s + end


def without(s: str, *subs: str) -> str:
    """Return `s` with every occurrence of each of `subs` removed."""
    for sub in subs:
        if sub:
            s = s.replace(sub, "")
    return s


# ============================================================================
#                           Splitting and joining
# ============================================================================


def split(s: str, *separators: str) -> list[str]:
    """Split `s` on any of `separators`, discarding empty entries.

    Examples:
        >>> split("testaatestbbbtesta", "a", "b")
        ['test', 'test', 'test']
    """
    if not separators:
        raise InvalidArgumentError("separators", separators, "at least one required")
    # longest first so overlapping separators split on the longer one
    ordered = sorted((sep for sep in separators if sep), key=len, reverse=True)
    if not ordered:
        raise InvalidArgumentError("separators", separators, "at least one non-empty required")
    pattern = "|".join(re.escape(sep) for sep in ordered)
    return [part for part in re.split(pattern, s) if part]


def except_blank(strings: Iterable[str | None]) -> Iterator[str]:
    """Yield the items of `strings` that are not None, empty or whitespace."""
    for s in strings:
        if s is not None and not is_blank(s):
            yield s


def join_to_string(items: Iterable[object], separator: str) -> str:
    """Join the string form of each item with `separator`."""
    guard_not_none(separator, "separator")
    return separator.join(str(item) for item in items)


# ============================================================================
#                               Distances
# ============================================================================


def levenshtein_distance(a: str, b: str) -> int:
    """Return the Levenshtein edit distance between `a` and `b`.

    Uses the two-row dynamic-programming formulation, O(len(a) * len(b)) time
    and O(len(b)) space.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost)
            )
        previous = current
    return previous[-1]
