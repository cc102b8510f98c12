"""Regular expression helpers."""

from __future__ import annotations

import re

from sundries.utils.guards import guard_not_none


def match_or_none(pattern: str | re.Pattern[str], text: str, group: int | str = 0) -> str | None:
    """Return `group` of the first match of `pattern` in `text`.

    Returns None when nothing matches or when the group did not take part
    in the match.

    Examples:
        >>> match_or_none(r"id=(\\d+)", "user?id=42", 1)
        '42'
    """
    guard_not_none(pattern, "pattern")
    guard_not_none(text, "text")
    match = re.search(pattern, text)
    return match.group(group) if match else None
