"""URI construction and in-place parameter rewriting.

Two rewrites are provided:

- `set_query_parameter` sets ``key=value`` in the query component, replacing
  the first existing occurrence of ``key`` in place or appending it.
- `set_route_parameter` sets a ``/key/value`` segment pair in the path,
  replacing the first existing ``/key`` segment in place or appending it.

Both operate on the canonical serialized form of the URI with a single
bounded search followed by one splice, so every character outside the
rewritten span is preserved verbatim. Neither percent-encodes nor decodes
anything; callers supply already URL-safe values.

A URI may be passed as a string or as a `urllib.parse.SplitResult`; the
result has the same type as the input.

Examples:
    >>> set_query_parameter("http://test.com", "a", "b")
    'http://test.com/?a=b'
    >>> set_route_parameter("http://test.com/a/b", "a", "x")
    'http://test.com/a/x'
"""

from __future__ import annotations

import logging
import re
from typing import TypeVar
from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

from sundries.errors import InvalidArgumentError, MalformedUriError
from sundries.utils.guards import guard_not_empty, guard_not_none

logger = logging.getLogger(__name__)

UriLike = TypeVar("UriLike", str, SplitResult)

DEFAULT_SCHEME = "http"  # pragma: no mutate

_SCHEME_PREFIX = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


# ============================================================================
#                              Construction
# ============================================================================


def _parse(uri: str) -> SplitResult:
    try:
        parts = urlsplit(uri)
        _ = parts.port  # raises on a non-numeric or out-of-range port
    except ValueError as e:
        raise MalformedUriError(uri, str(e)) from e
    if not parts.hostname:
        raise MalformedUriError(uri, "missing host")
    if not parts.path:
        parts = parts._replace(path="/")
    return parts


def to_uri(uri: str, base: str | SplitResult | None = None) -> SplitResult:
    """Parse a string into a structured, canonical URI.

    Without a base, a string lacking a ``scheme://`` prefix is treated as an
    ``http`` URI, and an empty path becomes ``/``. With a base, `uri` is
    resolved as a reference relative to it.

    Args:
        uri: The URI (or relative reference) to parse.
        base: Optional base URI to resolve `uri` against.

    Returns:
        The parsed URI.

    Raises:
        InvalidArgumentError: If `uri` is None.
        MalformedUriError: If the string (or base) is not a valid URI.

    Examples:
        >>> urlunsplit(to_uri("www.test.com"))
        'http://www.test.com/'
        >>> urlunsplit(to_uri("/root", "https://test.com/other"))
        'https://test.com/root'
    """
    guard_not_none(uri, "uri")
    if base is None:
        if not _SCHEME_PREFIX.match(uri):
            uri = f"{DEFAULT_SCHEME}://{uri}"
        return _parse(uri)

    base_parts = to_uri(base) if isinstance(base, str) else base
    return _parse(urljoin(urlunsplit(base_parts), uri))


def _serialize(uri: str | SplitResult) -> tuple[SplitResult, str]:
    guard_not_none(uri, "uri")
    if isinstance(uri, str):
        uri = to_uri(uri)
    elif not isinstance(uri, SplitResult):
        raise InvalidArgumentError("uri", uri, "expected str or SplitResult")
    return uri, urlunsplit(uri)


def _reconstitute(original: UriLike, rewritten: str) -> UriLike:
    if isinstance(original, SplitResult):
        return urlsplit(rewritten)
    return rewritten


def _component_bounds(parts: SplitResult, text: str) -> tuple[int, int, int]:
    """Return ``(path_start, query_start, end)`` offsets of `parts` in `text`.

    `text` is ``urlunsplit(parts)``, which always ends with the path, then
    ``?query`` and ``#fragment`` when present, so the offsets are counted
    back from the end. ``query_start`` is the index of ``?`` (or ``end``
    when there is no query) and ``end`` is the index of ``#`` (or the string
    length).
    """
    end = len(text) - (len(parts.fragment) + 1 if parts.fragment else 0)
    query_start = end - (len(parts.query) + 1 if parts.query else 0)
    path_start = query_start - len(parts.path)
    # urlunsplit puts a "/" between an authority and a relative path
    if path_start > 0 and not parts.path.startswith("/") and text[path_start - 1] == "/":
        path_start -= 1
    return path_start, query_start, end


# ============================================================================
#                               Rewriting
# ============================================================================


def _query_pattern(key: str) -> re.Pattern[str]:
    # delimiter, then the whole key, then an optional "=value" run
    return re.compile(rf"[?&]({re.escape(key)}(?:=[^&/#]*)?)(?=[&/#]|$)")


def _route_pattern(key: str) -> re.Pattern[str]:
    # a whole segment equal to the key, then an optional "/value" segment
    return re.compile(rf"/({re.escape(key)}(?:/[^/]*)?)(?=/|$)")


def set_query_parameter(uri: UriLike, key: str, value: str | None = None) -> UriLike:
    """Return `uri` with query parameter `key` set to `value`.

    The first existing ``key`` parameter (whether ``key=value``, ``key=`` or a
    bare ``key`` stub) is replaced in place by ``key=value``. When the key is
    absent, ``&key=value`` is appended to an existing query, or ``?key=value``
    starts a new one; a fragment stays at the end.

    A key that is a prefix of another key (``a`` vs. ``ab``) never matches.
    Only the first occurrence of a duplicated key is rewritten.

    Args:
        uri: The URI as a string or `SplitResult`.
        key: Parameter name, matched literally.
        value: Parameter value; None is written as the empty string.

    Returns:
        A new URI of the same type as `uri`.

    Raises:
        InvalidArgumentError: If `uri` is None or `key` is None or empty.
        MalformedUriError: If a string `uri` cannot be parsed.
    """
    guard_not_empty(key, "key")
    parts, text = _serialize(uri)
    value = value or ""
    replacement = f"{key}={value}"

    _, query_start, end = _component_bounds(parts, text)
    if match := _query_pattern(key).search(text, query_start, end):
        start, stop = match.span(1)
        logger.debug("Replacing query parameter %r at [%d:%d]", key, start, stop)
        rewritten = text[:start] + replacement + text[stop:]
    else:
        separator = "&" if query_start < end else "?"
        logger.debug("Appending query parameter %r with %r", key, separator)
        rewritten = text[:end] + separator + replacement + text[end:]

    return _reconstitute(uri, rewritten)


def set_route_parameter(uri: UriLike, key: str, value: str | None = None) -> UriLike:
    """Return `uri` with the route segment pair ``/key/value`` set.

    The first path segment equal to `key` (together with the segment that
    follows it, if any) is replaced in place by ``key/value``. When no such
    segment exists, a trailing slash is ensured on the path and
    ``key/value`` is appended; query and fragment are kept after the path.

    Args:
        uri: The URI as a string or `SplitResult`.
        key: Segment name, matched literally against whole segments.
        value: Segment value; None is written as the empty string.

    Returns:
        A new URI of the same type as `uri`.

    Raises:
        InvalidArgumentError: If `uri` is None or `key` is None or empty.
        MalformedUriError: If a string `uri` cannot be parsed.
    """
    guard_not_empty(key, "key")
    parts, text = _serialize(uri)
    value = value or ""
    replacement = f"{key}/{value}"

    path_start, path_end, _ = _component_bounds(parts, text)
    if match := _route_pattern(key).search(text, path_start, path_end):
        start, stop = match.span(1)
        logger.debug("Replacing route parameter %r at [%d:%d]", key, start, stop)
        rewritten = text[:start] + replacement + text[stop:]
    else:
        logger.debug("Appending route parameter %r", key)
        if not text[path_start:path_end].endswith("/"):
            replacement = "/" + replacement
        rewritten = text[:path_end] + replacement + text[path_end:]

    return _reconstitute(uri, rewritten)
