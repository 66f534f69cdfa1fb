"""Convenience wrapper around ElementTree elements."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from .misc import str_to_value

Attributes = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


def _to_text(value: Any) -> str:
    """Write a value the way a default-formatted output stream would."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class XmlElement:
    """An XML element whose children, optionally filtered by tag, can be iterated."""

    def __init__(self, element: Optional[ET.Element], name: str = "") -> None:
        self.element = element
        self.name = name

    def __bool__(self) -> bool:
        return self.element is not None

    def __iter__(self) -> Iterator["XmlElement"]:
        if self.element is None:
            return
        for child in self.element:
            if not isinstance(child.tag, str):
                continue
            if not self.name or child.tag == self.name:
                yield XmlElement(child)

    @property
    def text(self) -> Optional[str]:
        """The element's text, or ``None`` when it has none."""
        return None if self.element is None else self.element.text

    def get_value(self, kind: type = str) -> Any:
        """Parse the element's text as ``kind``; the zero value if there is no text."""
        text = self.text
        if text is None:
            return kind()
        return str_to_value(text, kind)

    def attribute(self, name: str, kind: type = str) -> Any:
        """Parse attribute ``name`` as ``kind``; the zero value if it is missing."""
        if self.element is None:
            return kind()
        raw = self.element.get(name)
        if raw is None:
            return kind()
        return str_to_value(raw, kind)

    def first_child_element(self, name: str) -> "XmlElement":
        """Return the first child with tag ``name``, wrapping ``None`` if absent."""
        if self.element is None:
            return XmlElement(None)
        child = next((c for c in self.element if c.tag == name), None)
        return XmlElement(child)


def create_xml_element(name: str, text: Any = "", attributes: Optional[Attributes] = None) -> ET.Element:
    """Create an element with optional text and attributes."""
    element = ET.Element(name)
    content = _to_text(text)
    if content:
        element.text = content
    if attributes is not None:
        pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
        for attr_name, attr_value in pairs:
            element.set(attr_name, _to_text(attr_value))
    return element