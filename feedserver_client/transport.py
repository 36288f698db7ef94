from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol
import xml.etree.ElementTree as ET

import feedparser
import requests

from .config import ClientSettings
from .exceptions import TransportError
from .models import Entry, OtherContent

logger = logging.getLogger(__name__)

ATOM_XMLNS = "http://www.w3.org/2005/Atom"


class FeedTransport(Protocol):
    def fetch_entry(self, url: str) -> Entry:  # pragma: no cover - interface
        ...

    def fetch_feed(self, url: str) -> List[Entry]:  # pragma: no cover - interface
        ...

    def delete(self, url: str) -> None:  # pragma: no cover - interface
        ...


def _inline_payloads(body: bytes) -> List[Optional[str]]:
    """
    Serialize the inline XML payload of every Atom entry in document order.

    feedparser flattens markup nested in <content>, so the payload element is
    read from the raw document. Entries without an inline element yield None.
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError:
        return []
    entry_tag = "{%s}entry" % (ATOM_XMLNS,)
    elems = [root] if root.tag == entry_tag else root.findall(entry_tag)
    payloads: List[Optional[str]] = []
    for elem in elems:
        content = elem.find("{%s}content" % (ATOM_XMLNS,))
        if content is not None and len(content):
            payloads.append(ET.tostring(content[0], encoding="unicode"))
        else:
            payloads.append(None)
    return payloads


def _to_entry(raw: Dict[str, Any], payload: Optional[str] = None) -> Entry:
    content = None
    for item in raw.get("content") or []:
        mime = (item.get("type") or "").lower()
        if mime.endswith("xml"):
            content = OtherContent(xml=payload or item.get("value") or "", mime_type=mime)
            break
    if content is None and payload is not None:
        content = OtherContent(xml=payload)
    return Entry(id=raw.get("id"), title=raw.get("title"), content=content)


class HttpFeedTransport:
    """
    Fetches and deletes Atom entries over HTTP.

    Documents are downloaded with requests and parsed with feedparser;
    inline XML payloads are read from the raw document with ElementTree.
    Every failure surfaces as TransportError; nothing is retried.
    """

    def __init__(self, settings: Optional[ClientSettings] = None, session: Optional[requests.Session] = None) -> None:
        self.settings = settings or ClientSettings.from_env()
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = self.settings.user_agent

    def _get_entries(self, url: str) -> List[Entry]:
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.settings.timeout_sec)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"Failed to fetch {url} ({e})") from e

        doc = feedparser.parse(resp.content)
        entries = getattr(doc, "entries", None)
        if getattr(doc, "bozo", 0) and not entries:
            exc = getattr(doc, "bozo_exception", None)
            msg = f"Invalid Atom document: {url}"
            if exc:
                msg += f" ({exc})"
            raise TransportError(msg)
        if not isinstance(entries, list):
            raise TransportError(f"Document has no entries: {url}")

        payloads = _inline_payloads(resp.content)
        return [
            _to_entry(raw, payloads[i] if i < len(payloads) else None)
            for i, raw in enumerate(entries)
        ]

    def fetch_entry(self, url: str) -> Entry:
        entries = self._get_entries(url)
        if not entries:
            raise TransportError(f"No entry found at {url}")
        return entries[0]

    def fetch_feed(self, url: str) -> List[Entry]:
        return self._get_entries(url)

    def delete(self, url: str) -> None:
        logger.debug("DELETE %s", url)
        try:
            resp = self.session.delete(url, timeout=self.settings.timeout_sec)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"Failed to delete {url} ({e})") from e
