"""In-memory key-value storage."""

import asyncio
from typing import Any


class MemoryKVStore:
    """In-memory key-value store.

    Suitable for development and testing. Data is lost on restart.
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize memory KV store.

        Args:
            **kwargs: Ignored (for compatibility with other backends)
        """
        self._data: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> str | None:
        """Get a value by key."""
        async with self._lock:
            return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        """Set a value."""
        async with self._lock:
            self._data[key] = value

    async def keys(self) -> list[str]:
        """List stored keys."""
        async with self._lock:
            return list(self._data)

    async def clear(self) -> None:
        """Clear all data. Useful for testing."""
        async with self._lock:
            self._data.clear()
