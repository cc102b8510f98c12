"""Unit tests for sundries.xml."""

from xml.etree import ElementTree

import pytest

from sundries.errors import XmlAttributeNotFoundError, XmlElementNotFoundError
from sundries.xml import (
    attribute_strict,
    descendant,
    descendant_strict,
    element_strict,
    local_name,
    strip_namespaces,
)

# pylint: disable=magic-value-comparison, redefined-outer-name

DOCUMENT = """\
<root xmlns="urn:a" xmlns:b="urn:b" xml:lang="en" b:id="1" plain="x">
  <b:child kind="first"><leaf/></b:child>
  <b:child kind="second"/>
</root>
"""


@pytest.fixture
def root():
    """A parsed document mixing a default and a prefixed namespace."""
    return ElementTree.fromstring(DOCUMENT)


@pytest.mark.parametrize(
    "name, expected", [("{urn:a}root", "root"), ("root", "root"), ("{}x", "x")]
)
def test_local_name(name, expected):
    """The Clark-notation namespace part is removed."""
    assert local_name(name) == expected


def test_strip_namespaces_tags(root):
    """Every tag in the tree loses its namespace."""
    stripped = strip_namespaces(root)
    assert [e.tag for e in stripped.iter()] == ["root", "child", "leaf", "child"]


def test_strip_namespaces_attributes(root):
    """Namespaced attributes keep their local name; xml:* attributes are dropped."""
    stripped = strip_namespaces(root)
    assert stripped.attrib == {"id": "1", "plain": "x"}


def test_strip_namespaces_returns_copy(root):
    """The input tree is left untouched."""
    strip_namespaces(root)
    assert root.tag == "{urn:a}root"
    assert root[0].tag == "{urn:b}child"


def test_strip_namespaces_serializes_without_prefixes(root):
    """The serialized result carries no namespace declarations."""
    text = ElementTree.tostring(strip_namespaces(root), encoding="unicode")
    assert "xmlns" not in text
    assert "<child kind=\"first\"><leaf /></child>" in text


def test_descendant(root):
    """Depth-first search that never returns the starting element itself."""
    stripped = strip_namespaces(root)
    assert descendant(stripped, "leaf").tag == "leaf"
    assert descendant(stripped, "child").get("kind") == "first"
    assert descendant(stripped, "root") is None
    assert descendant(stripped, "missing") is None


def test_descendant_strict(root):
    """Missing descendants raise."""
    stripped = strip_namespaces(root)
    assert descendant_strict(stripped, "leaf").tag == "leaf"
    with pytest.raises(XmlElementNotFoundError) as exc_info:
        descendant_strict(stripped, "missing")
    assert exc_info.value.name == "missing"


def test_element_strict_only_looks_at_children(root):
    """Grandchildren are not direct children."""
    stripped = strip_namespaces(root)
    assert element_strict(stripped, "child").get("kind") == "first"
    with pytest.raises(XmlElementNotFoundError):
        element_strict(stripped, "leaf")


def test_attribute_strict(root):
    """Present attributes are returned; absent ones raise."""
    stripped = strip_namespaces(root)
    assert attribute_strict(stripped, "plain") == "x"
    with pytest.raises(XmlAttributeNotFoundError) as exc_info:
        attribute_strict(stripped, "missing")
    assert exc_info.value.element == "root"
