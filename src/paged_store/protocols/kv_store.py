"""KVStore protocol for text key-value storage backends."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KVStore(Protocol):
    """Protocol for key-value storage backends (memory, Redis).

    Keys and values are plain text. Failures are raised, never returned.
    """

    async def get(self, key: str) -> str | None:
        """Get a value by key. Returns None if not found."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Set a value, overwriting any existing one."""
        ...
