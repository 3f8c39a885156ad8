"""Paged JSON storage over a text key-value store.

Each page of a dataset is stored as JSON text under ``<base_key>-<page>``.
Every ``write`` and ``read`` issues exactly one store request; the storage
object itself keeps no state besides its store handle and base key, so
concurrent calls are not ordered against each other.
"""

import json
from typing import Any

from paged_store.config import Config
from paged_store.exceptions import (
    AccessError,
    DeserializationError,
    ErrorKind,
    InvalidPageError,
    PageNotFoundError,
    SerializationError,
    StoreError,
)
from paged_store.observability import (
    Timer,
    configure_logging,
    emit_counter,
    emit_timer,
    get_logger,
)
from paged_store.plugins import create_kv_store
from paged_store.protocols import KVStore

logger = get_logger(__name__)

KEY_SEPARATOR = "-"

Page = str | int


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def page_to_str(page: Page) -> str:
    """Render a page identifier in its canonical string form.

    Only ``str`` and ``int`` pages are accepted. Note that ``3`` and ``"3"``
    render identically and therefore address the same entry.

    Raises:
        InvalidPageError: If the page is any other type (including bool)
    """
    if isinstance(page, bool) or not isinstance(page, (str, int)):
        raise InvalidPageError(
            f"Page must be str or int, got {type(page).__name__}"
        )
    return str(page)


class PagedStorage:
    """Stores JSON-compatible values as pages of a keyed dataset.

    Example:
        storage = PagedStorage(MemoryKVStore(), "grid")
        await storage.write(0, {"rows": 2, "cols": 2})
        data = await storage.read(0)
    """

    def __init__(self, store: KVStore, base_key: str) -> None:
        """Initialize paged storage.

        Args:
            store: Text key-value store holding the pages
            base_key: Name of the dataset, prefixed to every page key
        """
        if not base_key:
            raise ValueError("base_key cannot be empty")
        self.store = store
        self.base_key = base_key

    @classmethod
    def from_config(cls, config: Config) -> "PagedStorage":
        """Create storage with the configured KV backend.

        Also applies the configured logging level and format to the
        package logger.
        """
        configure_logging(config.logging.level, config.logging.format)
        store = create_kv_store(
            config.kv.backend,
            redis_url=config.kv.redis_url,
        )
        return cls(store, config.base_key)

    async def close(self) -> None:
        """Close the underlying store if it holds connections."""
        close = getattr(self.store, "close", None)
        if close is not None:
            await close()

    def composite_key(self, page: Page) -> str:
        """Get the store key for a page."""
        return f"{self.base_key}{KEY_SEPARATOR}{page_to_str(page)}"

    async def write(self, page: Page, value: Any) -> None:
        """Store a value as a page, overwriting any previous value.

        Args:
            page: Page identifier
            value: JSON-compatible value

        Raises:
            InvalidPageError: Page has no canonical string form
            SerializationError: Value cannot be encoded as JSON
            StoreError: The store rejected the write
        """
        key = self.composite_key(page)

        try:
            payload = json.dumps(value, allow_nan=False)
        except (TypeError, ValueError, RecursionError) as e:
            raise self._report(
                SerializationError(f"Cannot serialize page {key}: {e}", key)
            ) from e

        with Timer() as timer:
            try:
                await self.store.set(key, payload)
            except Exception as e:
                raise self._report(StoreError(f"Failed to write page {key}: {e}", key)) from e

        logger.debug(
            "Page written",
            context={"key": key, "length": len(payload)},
            duration_ms=timer.duration_ms,
        )
        emit_counter("paged_store.write")
        emit_timer("paged_store.write.duration_ms", timer.duration_ms)

    async def read(self, page: Page) -> Any:
        """Load the value last written to a page.

        Args:
            page: Page identifier

        Returns:
            The decoded JSON value. Falsy values such as ``0``, ``False``,
            ``None`` or ``""`` are returned as stored.

        Raises:
            InvalidPageError: Page has no canonical string form
            PageNotFoundError: Nothing stored for the page
            StoreError: The store lookup failed
            DeserializationError: Stored payload is not valid JSON
        """
        key = self.composite_key(page)

        with Timer() as timer:
            try:
                payload = await self.store.get(key)
            except UnicodeDecodeError as e:
                raise self._report(
                    DeserializationError(f"Page {key} is not valid UTF-8 text: {e}", key)
                ) from e
            except Exception as e:
                raise self._report(StoreError(f"Failed to read page {key}: {e}", key)) from e

        # An empty payload is not a JSON document; treat it like absence.
        if payload is None or payload == "":
            raise self._report(PageNotFoundError(f"Page not found: {key}", key))

        try:
            value = json.loads(payload, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            raise self._report(
                DeserializationError(f"Page {key} holds invalid JSON: {e}", key)
            ) from e

        logger.debug(
            "Page read",
            context={"key": key, "length": len(payload)},
            duration_ms=timer.duration_ms,
        )
        emit_counter("paged_store.read")
        emit_timer("paged_store.read.duration_ms", timer.duration_ms)
        return value

    def _report(self, error: AccessError) -> AccessError:
        """Log an access error and count it by kind."""
        context = {"key": error.key, "kind": error.kind.value}
        if error.kind is ErrorKind.NOT_FOUND:
            logger.debug(str(error), context=context)
        elif error.kind is ErrorKind.STORE_ERROR:
            logger.error(str(error), context=context, error=error)
        else:
            logger.warning(str(error), context=context, error=error)

        emit_counter("paged_store.error", {"kind": error.kind.value})
        return error
