from __future__ import annotations

import logging
from typing import Any, List, Optional, Union

from .exceptions import FeedClientError, XmlParseError
from .models import Array, Entry, EntryMap, OtherContent, RawValue
from .xmlutil import XmlUtil

logger = logging.getLogger(__name__)


def _as_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Field '{key}' has non-string value of type {type(value).__name__}")
    return value


def _to_values(key: str, raw: RawValue) -> List[str]:
    if isinstance(raw, Array):
        return [_as_str(v, key) for v in raw.values]
    return [_as_str(raw.value, key)]


def to_entry_map(
    entry: Entry,
    *,
    xml_util: Optional[XmlUtil] = None,
    log: Union[logging.Logger, bool, None] = None,
) -> EntryMap:
    """
    Convert one payload-in-content entry into a map of lists of strings.

    Keys are the payload element names. Non-repeated elements map to a
    one-element list; repeated elements keep their document order.

    Raises FeedClientError when the entry has no XML payload or the payload
    is not well-formed. ParserConfigurationError propagates unwrapped.
    """
    content = entry.content
    if not isinstance(content, OtherContent):
        raise FeedClientError(f"Entry {entry.id!r} has no XML payload content")

    blob = content.xml
    if log is None:
        log = logger
    if log:
        log.info("Entry info %s", blob)

    util = xml_util or XmlUtil()
    try:
        raw = util.convert_xml_to_properties(blob)
    except XmlParseError as e:
        raise FeedClientError(f"Cannot parse payload of entry {entry.id!r}") from e

    return {key: _to_values(key, value) for key, value in raw.items()}
