from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class OtherContent:
    """Opaque entry content carrying a raw XML blob."""
    xml: str
    mime_type: str = "application/xml"


@dataclass(frozen=True)
class Entry:
    """
    One entry of a payload-in-content feed, as returned by a transport.

    `content` is an OtherContent when the entry embeds an XML payload.
    """
    id: Optional[str] = None
    title: Optional[str] = None
    content: Any = None


@dataclass(frozen=True)
class Scalar:
    value: Any


@dataclass(frozen=True)
class Array:
    values: Tuple[Any, ...]


RawValue = Union[Scalar, Array]
RawPropertyMap = Dict[str, RawValue]

EntryMap = Dict[str, List[str]]
FeedResult = List[EntryMap]
