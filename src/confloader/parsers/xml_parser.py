"""
Parser for XML files.

The children of the root element become the top-level keys:

    <config>
        <app name="demo"><debug>true</debug></app>
        <host>a</host>
        <host>b</host>
    </config>

yields ``{"app": {"@attributes": {"name": "demo"}, "debug": "true"},
"host": ["a", "b"]}``.
"""
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Union

from ..exceptions import ParseError
from .base import FileParser

logger = logging.getLogger(__name__)

ATTRIBUTES_KEY = "@attributes"
TEXT_KEY = "#text"


def element_to_value(element: ET.Element) -> Any:
    """Convert an element to a string (leaf) or a dict (everything else)."""
    children = list(element)
    text = (element.text or "").strip()

    if not children and not element.attrib:
        return text if text else {}

    result: Dict[str, Any] = {}
    if element.attrib:
        result[ATTRIBUTES_KEY] = dict(element.attrib)

    for child in children:
        value = element_to_value(child)
        if child.tag not in result:
            result[child.tag] = value
        elif isinstance(result[child.tag], list):
            result[child.tag].append(value)
        else:
            result[child.tag] = [result[child.tag], value]

    if text and not children:
        result[TEXT_KEY] = text

    return result


class XmlParser(FileParser):
    extensions = ["xml"]

    def parse(self, path: Union[str, Path]) -> Dict[str, Any]:
        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as e:
            raise ParseError(path, f"Invalid XML: {e}") from e
        except OSError as e:
            raise ParseError(path, str(e)) from e

        data = element_to_value(root)
        if not isinstance(data, dict):
            # A root holding only text has no keys
            raise ParseError(path, "Root element has no child elements")

        logger.debug(f"Loaded XML config: {path}")
        return data
