"""Paged store exceptions."""

from enum import Enum


class ErrorKind(str, Enum):
    """Discriminates why a page access failed."""

    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"
    SERIALIZATION_ERROR = "serialization_error"
    DESERIALIZATION_ERROR = "deserialization_error"


class PagedStoreError(Exception):
    """Base exception for paged-store."""

    pass


class ConfigError(PagedStoreError):
    """Configuration error."""

    pass


class InvalidPageError(PagedStoreError, TypeError):
    """Page identifier has no canonical string form."""

    pass


class AccessError(PagedStoreError):
    """A read or write against the store failed.

    Attributes:
        kind: Why the access failed
        key: Composite key that was being accessed
    """

    kind: ErrorKind

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message)
        self.key = key


class PageNotFoundError(AccessError):
    """No entry stored for the page."""

    kind = ErrorKind.NOT_FOUND


class StoreError(AccessError):
    """The underlying store operation failed."""

    kind = ErrorKind.STORE_ERROR


class SerializationError(AccessError):
    """Value cannot be encoded as JSON."""

    kind = ErrorKind.SERIALIZATION_ERROR


class DeserializationError(AccessError):
    """Stored payload is not valid JSON."""

    kind = ErrorKind.DESERIALIZATION_ERROR
