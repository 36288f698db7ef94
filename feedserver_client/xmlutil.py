from __future__ import annotations

from typing import Callable, Dict, List, Optional
import xml.etree.ElementTree as ET

from .exceptions import ParserConfigurationError, XmlParseError
from .models import Array, RawPropertyMap, Scalar


def _local_name(tag: str) -> str:
    # "{namespace}name" -> "name"
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


class XmlUtil:
    """
    Converts a payload XML document into a raw property map.

    The root element is the payload container. Each direct child becomes a
    property keyed by its local name: a child seen once yields Scalar(text),
    a repeated child yields Array of all texts in document order. A child with
    element children of its own yields a nested property map as its value.
    """

    def __init__(self, parser_factory: Optional[Callable[[], ET.XMLParser]] = None) -> None:
        self._parser_factory = parser_factory or ET.XMLParser

    def _new_parser(self) -> ET.XMLParser:
        try:
            return self._parser_factory()
        except Exception as e:
            raise ParserConfigurationError(f"Cannot construct XML parser ({e})") from e

    def convert_xml_to_properties(self, blob: str) -> RawPropertyMap:
        parser = self._new_parser()
        try:
            parser.feed(blob)
            root = parser.close()
        except ET.ParseError as e:
            raise XmlParseError(f"Invalid payload XML ({e})") from e
        return self._element_to_properties(root)

    def _element_to_properties(self, elem: ET.Element) -> RawPropertyMap:
        grouped: Dict[str, List[object]] = {}
        for child in elem:
            if not isinstance(child.tag, str):
                # comments and processing instructions
                continue
            if len(child):
                value: object = self._element_to_properties(child)
            else:
                value = (child.text or "").strip()
            grouped.setdefault(_local_name(child.tag), []).append(value)

        props: RawPropertyMap = {}
        for key, values in grouped.items():
            if len(values) == 1:
                props[key] = Scalar(values[0])
            else:
                props[key] = Array(tuple(values))
        return props
