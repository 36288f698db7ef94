from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence, Union
from urllib.parse import urlparse

from .exceptions import EntryContractError, FeedClientError, TransportError
from .models import EntryMap, FeedResult
from .normalizer import to_entry_map
from .transport import FeedTransport, HttpFeedTransport
from .xmlutil import XmlUtil

logger = logging.getLogger(__name__)


def _is_valid_url(url: str) -> bool:
    parts = urlparse(url)
    return bool(parts.scheme and parts.netloc)


class TypelessFeedClient:
    """
    Feed client that represents payload-in-content entries as generic maps.

    Each entry is returned as a map of element name -> list of string values.
    Non-repeatable elements have a one-element list.
    """

    def __init__(
        self,
        transport: Optional[FeedTransport] = None,
        *,
        xml_util: Optional[XmlUtil] = None,
        log: Union[logging.Logger, bool, None] = None,
    ) -> None:
        self.transport = transport or HttpFeedTransport()
        self.xml_util = xml_util or XmlUtil()
        # payload logger handed to to_entry_map; False disables it
        self.log = log

    def get_entry(self, url: str) -> EntryMap:
        """
        Fetch a single entry and return it as an entry map.

        Raises FeedClientError if the feed server cannot be reached, the URL
        cannot be fetched or the payload XML cannot be parsed.
        """
        try:
            entry = self.transport.fetch_entry(url)
        except TransportError as e:
            raise FeedClientError(f"Error while fetching {url}") from e
        return to_entry_map(entry, xml_util=self.xml_util, log=self.log)

    def get_feed(self, url: str) -> FeedResult:
        """
        Fetch all entries for a feed query and return one entry map per entry,
        in the order the server returned them. Fails as a whole if any entry
        cannot be converted.
        """
        try:
            entries = self.transport.fetch_feed(url)
        except TransportError as e:
            raise FeedClientError(f"Error while fetching {url}") from e

        return [to_entry_map(entry, xml_util=self.xml_util, log=self.log) for entry in entries]

    def delete_entry(self, url: str, entry: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        """
        Delete an entry.

        With only `url`, it must be the full URL of the entry. With `entry`,
        `url` is the feed URL without ID and the entry's 'name' field is
        appended to it.

        Raises EntryContractError if `entry` lacks a usable 'name', and
        FeedClientError on communication failure or an invalid URL.
        """
        if entry is None:
            self._delete_url(url)
            return

        try:
            names = entry["name"]
        except KeyError as e:
            raise EntryContractError("entry map does not have 'name' key") from e
        if names is None:
            raise EntryContractError("entry map does not have 'name' key")
        try:
            name = names[0]
        except IndexError as e:
            raise EntryContractError("'name' in entry map is invalid.") from e

        entry_url = f"{url}/{name}"
        if not _is_valid_url(entry_url):
            raise FeedClientError(f"invalid base URL: {url!r}")
        self._delete_url(entry_url)

    def delete_entries(self, base_url: str, entries: Iterable[Mapping[str, Sequence[str]]]) -> None:
        """Delete each entry, one request per entry. Stops at the first failure."""
        for entry in entries:
            self.delete_entry(base_url, entry)

    def _delete_url(self, url: str) -> None:
        try:
            self.transport.delete(url)
        except TransportError as e:
            raise FeedClientError(f"Error while deleting {url}") from e
        logger.info("Deleted %s", url)

    def update_entry(self, url: str, entry: Mapping[str, str]) -> None:
        raise NotImplementedError("update_entry is not implemented")

    def update_entries(self, url: str, entries: Iterable[Mapping[str, str]]) -> None:
        raise NotImplementedError("update_entries is not implemented")

    def insert_entry(self, url: str, entry: Any) -> None:
        """Insert from an entry map or a bean-like object. Not implemented."""
        raise NotImplementedError("insert_entry is not implemented")

    def insert_entries(self, url: str, entries: Iterable[Mapping[str, str]]) -> None:
        raise NotImplementedError("insert_entries is not implemented")
