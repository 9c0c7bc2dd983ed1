"""XML adapter built on ElementTree.

Attributes merge into the element's mapping alongside its children, the root
element itself is not kept as a wrapper key, and repeated sibling elements
collapse to the last one.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

from praetorian.adapters.base import FileAdapter, located
from praetorian.exceptions import ConfigParseError
from praetorian.validator.models import ConfigFormat

TEXT_KEY = "_"


def _local_name(tag: str) -> str:
    """Drop the ``{namespace}`` prefix ElementTree puts on qualified names."""
    return tag.rsplit("}", 1)[-1]


def _element_to_value(element: ET.Element) -> Any:
    children = list(element)
    text = (element.text or "").strip()

    if not element.attrib and not children:
        return text

    node: dict[str, Any] = {
        _local_name(name): value for name, value in element.attrib.items()
    }
    for child in children:
        node[_local_name(child.tag)] = _element_to_value(child)
    if text:
        node[TEXT_KEY] = text
    return node


def parse_xml_content(text: str, source: str | None = None) -> dict[str, Any]:
    if not text or not text.strip():
        return {}

    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ConfigParseError(
            f"XML parsing failed{located(source)}: {e}",
            file_path=source,
            details={"line": e.position[0] if e.position else None},
        ) from e

    value = _element_to_value(root)
    return value if isinstance(value, dict) else {}


class XmlFileAdapter(FileAdapter):
    format = ConfigFormat.xml
    extensions = (".xml",)

    def parse(self, text: str, source: str | None = None) -> dict[str, Any]:
        return parse_xml_content(text, source)
