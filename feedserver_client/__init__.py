"""
feedserver_client

A small client for Atom/GData "payload-in-content" feeds, where each entry's
data is embedded as raw XML inside its content element.

Core ideas:
- Input: feed or entry URLs
- Process: fetch (requests) → parse Atom (feedparser) → parse payload XML → normalize
- Output: entry maps of field name → list of string values

Example
-------
from feedserver_client import TypelessFeedClient

client = TypelessFeedClient()

widgets = client.get_feed("https://example.com/feeds/widgets")
for widget in widgets:
    print(widget["name"][0], widget.get("color", []))

client.delete_entries("https://example.com/feeds/widgets", widgets[:1])
"""
from .client import TypelessFeedClient
from .config import ClientSettings
from .exceptions import (
    ConfigurationError,
    EntryContractError,
    FeedClientError,
    ParserConfigurationError,
    TransportError,
    XmlParseError,
)
from .log import setup_logging
from .models import Entry, OtherContent
from .transport import FeedTransport, HttpFeedTransport

__all__ = [
    "TypelessFeedClient",
    "ClientSettings",
    "FeedTransport",
    "HttpFeedTransport",
    "Entry",
    "OtherContent",
    "FeedClientError",
    "TransportError",
    "XmlParseError",
    "ParserConfigurationError",
    "EntryContractError",
    "ConfigurationError",
    "setup_logging",
]
