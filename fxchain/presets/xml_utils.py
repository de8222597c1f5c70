"""
Element tree helpers for preset documents.

Readers never raise: a missing child or unparseable text gives back the
caller's default. Writers create plain ElementTree nodes.
"""

import math
import re
import xml.etree.ElementTree as ET
from typing import Iterator, Optional

from fxchain.config import TRUE_TOKENS

# Anything outside the XML 1.0 Char production; no parser accepts these back.
_XML_ILLEGAL_CHARS = re.compile(
    "[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def is_element(node) -> bool:
    """True for real elements; comments and processing instructions have non-str tags."""
    return isinstance(getattr(node, "tag", None), str)


def has_child_nodes(element: ET.Element) -> bool:
    """True if the element holds any child element, comment, or non-blank text."""
    if len(element) > 0:
        return True
    return bool((element.text or "").strip())


def iter_child_elements(element: Optional[ET.Element]) -> Iterator[ET.Element]:
    """Direct child elements in document order, skipping comments and PIs."""
    if element is None:
        return
    for child in element:
        if is_element(child):
            yield child


def select_element(parent: ET.Element, tag: str) -> Optional[ET.Element]:
    """First direct child with the given tag, or None."""
    for child in iter_child_elements(parent):
        if child.tag == tag:
            return child
    return None


def element_text(element: ET.Element) -> str:
    """All character data under the element, comments excluded."""
    parts = [element.text or ""]
    for child in element:
        if is_element(child):
            parts.append(element_text(child))
        parts.append(child.tail or "")
    return "".join(parts)


def select_node_text(parent: ET.Element, tag: str, default: str = "") -> str:
    child = select_element(parent, tag)
    if child is None:
        return default
    text = element_text(child)
    return text if text else default


def parse_float(text: Optional[str], default: float) -> float:
    """Parse decimal text; blank, garbage, nan and inf all give the default."""
    if text is None:
        return default
    try:
        value = float(text.strip())
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return value


def finite_or_default(value: float, default: float) -> float:
    """float(value), or default when that is nan or inf."""
    value = float(value)
    return value if math.isfinite(value) else default


def select_node_float(parent: ET.Element, tag: str, default: float = 0.0) -> float:
    return parse_float(select_node_text(parent, tag, ""), default)


def select_node_bool(parent: ET.Element, tag: str, default: bool = False) -> bool:
    text = select_node_text(parent, tag, "").strip().lower()
    if not text:
        return default
    return text in TRUE_TOKENS


def format_float(value: float) -> str:
    """Canonical decimal text; repr() is the shortest form that reads back exactly."""
    return repr(float(value))


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def xml_safe_text(text: str) -> str:
    """Drop characters a well-formed document cannot carry (control chars, lone surrogates)."""
    return _XML_ILLEGAL_CHARS.sub("", text)


def add_element(parent: ET.Element, tag: str, text: str) -> ET.Element:
    """Append a text-only child element."""
    child = ET.SubElement(parent, tag)
    child.text = xml_safe_text(text) if text else text
    return child


def parse_xml_string(text: str) -> ET.Element:
    """
    Parse document text into an element tree, keeping comments as nodes.

    Raises ET.ParseError for text that is not well-formed XML.
    """
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    return ET.fromstring(text, parser=parser)


def to_pretty_string(element: ET.Element, indent: str = "  ") -> str:
    """Serialize an element as an indented document with an XML declaration.

    Indentation is applied in place, so pass a freshly built element.
    """
    ET.indent(element, space=indent)
    body = ET.tostring(element, encoding="unicode")
    return f'<?xml version="1.0" encoding="utf-8"?>\n{body}\n'
