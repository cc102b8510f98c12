"""Enum parsing helpers."""

from __future__ import annotations

import enum
from typing import TypeVar

from sundries.errors import InvalidArgumentError
from sundries.utils.guards import guard_not_none

E = TypeVar("E", bound=enum.Enum)
F = TypeVar("F", bound=enum.Flag)


def parse_enum(enum_type: type[E], text: str, ignore_case: bool = True) -> E:
    """Parse an enum member from its name or its (integer) value.

    Args:
        enum_type: The enum class to parse into.
        text: Member name, or the string form of a member's value.
        ignore_case: Match member names case-insensitively.

    Returns:
        The matching member.

    Raises:
        InvalidArgumentError: If `text` is None or matches no member.
    """
    guard_not_none(text, "text")
    name = text.strip()

    if name in enum_type.__members__:
        return enum_type.__members__[name]
    if ignore_case:
        folded = name.casefold()
        for member_name, member in enum_type.__members__.items():
            if member_name.casefold() == folded:
                return member

    for member in enum_type:
        if str(member.value) == name:
            return member
    if name.lstrip("-").isdigit():
        try:
            return enum_type(int(name))
        except ValueError:
            pass  # reported below with the other misses

    raise InvalidArgumentError(
        "text", text, f"'{text}' is not a member of {enum_type.__name__}"
    )


def parse_enum_or_default(
    enum_type: type[E], text: str | None, default: E | None = None, ignore_case: bool = True
) -> E | None:
    """Like `parse_enum`, but return `default` instead of raising."""
    if text is None:
        return default
    try:
        return parse_enum(enum_type, text, ignore_case)
    except InvalidArgumentError:
        return default


def has_flags(value: F, *flags: F) -> bool:
    """Return True if `value` has every one of `flags` set."""
    return all(flag in value for flag in flags)
