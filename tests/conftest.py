from __future__ import annotations

from typing import Dict, List, Optional, Set

import pytest

from feedserver_client.exceptions import TransportError
from feedserver_client.models import Entry, OtherContent


def make_entry(xml: str, entry_id: str = "urn:entry:1") -> Entry:
    return Entry(id=entry_id, title=entry_id, content=OtherContent(xml=xml))


class FakeTransport:
    """In-memory transport recording every call."""

    def __init__(self) -> None:
        self.entries: Dict[str, Entry] = {}
        self.feeds: Dict[str, List[Entry]] = {}
        self.failing: Set[str] = set()
        self.deleted: List[str] = []
        self.delete_calls: List[str] = []

    def fetch_entry(self, url: str) -> Entry:
        if url in self.failing or url not in self.entries:
            raise TransportError(f"Failed to fetch {url}")
        return self.entries[url]

    def fetch_feed(self, url: str) -> List[Entry]:
        if url in self.failing or url not in self.feeds:
            raise TransportError(f"Failed to fetch {url}")
        return list(self.feeds[url])

    def delete(self, url: str) -> None:
        self.delete_calls.append(url)
        if url in self.failing:
            raise TransportError(f"Failed to delete {url}")
        self.deleted.append(url)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def widget_xml() -> str:
    return (
        "<entity>"
        "<name>widget42</name>"
        "<color>red</color>"
        "<tag>a</tag><tag>b</tag><tag>c</tag>"
        "</entity>"
    )
