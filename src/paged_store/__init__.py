"""Paged Store - JSON pages over a text key-value store."""

from paged_store.config import Config
from paged_store.exceptions import (
    AccessError,
    ConfigError,
    DeserializationError,
    ErrorKind,
    InvalidPageError,
    PagedStoreError,
    PageNotFoundError,
    SerializationError,
    StoreError,
)
from paged_store.observability import (
    LogLevel,
    RequestContext,
    StructuredLogger,
    Timer,
    configure_logging,
    emit_counter,
    emit_metric,
    emit_timer,
    get_logger,
    register_metric_callback,
)
from paged_store.storage import PagedStorage, page_to_str

__version__ = "0.1.0"
__all__ = [
    # Core
    "Config",
    "PagedStorage",
    "page_to_str",
    # Errors
    "AccessError",
    "ConfigError",
    "DeserializationError",
    "ErrorKind",
    "InvalidPageError",
    "PageNotFoundError",
    "PagedStoreError",
    "SerializationError",
    "StoreError",
    # Observability
    "LogLevel",
    "RequestContext",
    "StructuredLogger",
    "Timer",
    "configure_logging",
    "emit_counter",
    "emit_metric",
    "emit_timer",
    "get_logger",
    "register_metric_callback",
]
