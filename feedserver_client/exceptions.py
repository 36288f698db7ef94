class FeedClientError(Exception):
    """Raised when a feed or entry cannot be fetched, parsed or deleted."""


class TransportError(Exception):
    """Raised by a transport on network or service failure."""


class XmlParseError(Exception):
    """Raised when an entry payload is not well-formed XML."""


class ParserConfigurationError(RuntimeError):
    """Raised when the XML parser cannot be constructed. Not meant to be caught."""


class EntryContractError(LookupError):
    """Raised when an entry map passed by the caller has no usable 'name' field."""


class ConfigurationError(ValueError):
    """Raised when client settings from the environment are invalid."""
