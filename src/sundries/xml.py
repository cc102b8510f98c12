"""Helpers over `xml.etree.ElementTree` elements.

ElementTree spells namespaced names in Clark notation, ``{uri}local``.
"""

from __future__ import annotations

import copy
import logging
from xml.etree.ElementTree import Element

from sundries.errors import XmlAttributeNotFoundError, XmlElementNotFoundError
from sundries.utils.guards import guard_not_none

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
XMLNS_NAMESPACE = "http://www.w3.org/2000/xmlns/"


def local_name(name: str) -> str:
    """Strip the ``{namespace}`` part from a Clark-notation name."""
    return name.rsplit("}", 1)[-1] if name.startswith("{") else name


def _namespace(name: str) -> str | None:
    return name[1:].split("}", 1)[0] if name.startswith("{") else None


def strip_namespaces(element: Element) -> Element:
    """Return a deep copy of `element` with all namespaces removed.

    Tags of the element and all its descendants are reduced to their local
    names. Attribute names are reduced likewise, except that attributes in
    the reserved ``xml``/``xmlns`` namespaces (such as ``xml:lang``) and
    namespace declarations are dropped.

    Args:
        element: The element to copy; it is not modified.

    Returns:
        A new element tree without namespaces.
    """
    guard_not_none(element, "element")
    result = copy.deepcopy(element)
    for e in result.iter():
        if isinstance(e.tag, str):
            e.tag = local_name(e.tag)
        attributes = {
            local_name(name): value
            for name, value in e.attrib.items()
            if _namespace(name) not in (XML_NAMESPACE, XMLNS_NAMESPACE)
            and not name.startswith("xmlns")
        }
        e.attrib.clear()
        e.attrib.update(attributes)
    return result


def descendant(element: Element, tag: str) -> Element | None:
    """Return the first descendant (depth-first) with the given tag, or None."""
    guard_not_none(element, "element")
    return next((e for e in element.iter(tag) if e is not element), None)


def descendant_strict(element: Element, tag: str) -> Element:
    """Like `descendant`, but raise when no descendant matches.

    Raises:
        XmlElementNotFoundError: If there is no such descendant.
    """
    if (found := descendant(element, tag)) is None:
        raise XmlElementNotFoundError(str(element.tag), tag)
    return found


def element_strict(element: Element, tag: str) -> Element:
    """Return the first direct child with the given tag.

    Raises:
        XmlElementNotFoundError: If there is no such child.
    """
    guard_not_none(element, "element")
    if (found := element.find(tag)) is None:
        raise XmlElementNotFoundError(str(element.tag), tag)
    return found


def attribute_strict(element: Element, name: str) -> str:
    """Return the value of attribute `name`.

    Raises:
        XmlAttributeNotFoundError: If the attribute is absent.
    """
    guard_not_none(element, "element")
    if (value := element.get(name)) is None:
        raise XmlAttributeNotFoundError(str(element.tag), name)
    return value
