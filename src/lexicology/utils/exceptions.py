"""Application exception hierarchy."""


class LexicologyError(Exception):
    """Base exception for all Lexicology errors."""


# Search input errors

class ValidationError(LexicologyError):
    """Raised when a search term is empty or whitespace-only."""

    def __init__(self, term: str = "") -> None:
        self.term = term
        super().__init__("Search term must not be empty")


# Remote lookup errors

class LookupFailure(LexicologyError):
    """Base class for failures talking to a remote dictionary or word server."""


class NetworkError(LookupFailure):
    """Raised when the transport call itself fails (connectivity, timeout, non-2xx)."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        msg = f"Request to {url} failed"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class TransportError(LookupFailure):
    """Raised when a response body cannot be parsed as JSON at all."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        msg = f"Malformed response from {url}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class DecodeError(LexicologyError):
    """Raised when a payload lacks a required field or has the wrong shape."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        msg = f"Cannot decode '{path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


# Word store errors

class WordStoreError(LexicologyError):
    """Base class for word list loading and persistence errors."""


class EmptyWordListError(WordStoreError):
    """Raised when a word list is empty where at least one word is required."""

    def __init__(self) -> None:
        super().__init__("Word list is empty")


class SerializationError(WordStoreError):
    """Raised on malformed word list or progress data."""


class StorageError(WordStoreError):
    """Raised on file I/O errors."""


# Configuration errors

class ConfigurationError(LexicologyError):
    """Raised on configuration loading or validation errors."""
