"""Unit tests for sundries.errors."""

import pytest

from sundries.errors import (
    EmptySequenceError,
    InvalidArgumentError,
    MalformedUriError,
    ResourceNotFoundError,
    SundriesError,
    UnknownEncodingError,
    XmlAttributeNotFoundError,
    XmlElementNotFoundError,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "exc, builtin",
    [
        (InvalidArgumentError("x"), ValueError),
        (EmptySequenceError(), LookupError),
        (UnknownEncodingError("x"), LookupError),
        (MalformedUriError("x"), ValueError),
        (XmlElementNotFoundError("a", "b"), LookupError),
        (XmlAttributeNotFoundError("a", "b"), LookupError),
        (ResourceNotFoundError("pkg", "x"), FileNotFoundError),
    ],
)
def test_errors_share_base_and_builtin(exc, builtin):
    """Every error is a SundriesError and the matching built-in exception."""
    assert isinstance(exc, SundriesError)
    assert isinstance(exc, builtin)


def test_invalid_argument_message():
    """The message names the argument and, when given, the reason."""
    assert str(InvalidArgumentError("key")) == "Invalid argument 'key'"
    err = InvalidArgumentError("count", -1, "cannot be negative")
    assert str(err) == "Invalid argument 'count': cannot be negative"
    assert err.value == -1


def test_malformed_uri_message():
    """The offending URI is quoted in the message and kept on the error."""
    err = MalformedUriError("http://[::1", "Invalid IPv6 URL")
    assert str(err) == "Malformed URI 'http://[::1': Invalid IPv6 URL"
    assert err.uri == "http://[::1"


def test_xml_messages():
    """Element and attribute names appear in the messages."""
    assert "<child>" in str(XmlElementNotFoundError("root", "child"))
    assert "'id'" in str(XmlAttributeNotFoundError("root", "id"))


def test_resource_not_found_message():
    """Both package and resource name are reported."""
    err = ResourceNotFoundError("pkg.data", "missing.txt")
    assert "missing.txt" in str(err)
    assert "pkg.data" in str(err)
