"""Redis key-value storage backend."""

from typing import Any

from redis.asyncio import Redis

from paged_store.exceptions import ConfigError


class RedisKVStore:
    """Redis storage backend.

    Uses redis-py's asyncio client with responses decoded to text, so
    values round-trip as ``str``. Connection pooling, timeouts and retries
    are the client's concern.
    """

    def __init__(
        self,
        redis_url: str | None = None,
        client: Redis | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize Redis store.

        Args:
            redis_url: Connection URL, e.g. ``redis://localhost:6379/0``
            client: Pre-built client to use instead of ``redis_url``
            **kwargs: Ignored
        """
        if client is None:
            if not redis_url:
                raise ConfigError(
                    "RedisKVStore requires redis_url or client. "
                    "Use 'memory' backend for development."
                )
            client = Redis.from_url(redis_url, decode_responses=True)

        self.redis_url = redis_url
        self._client = client

    async def get(self, key: str) -> str | None:
        """Get a value by key."""
        value = await self._client.get(key)
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def set(self, key: str, value: str) -> None:
        """Set a value."""
        await self._client.set(key, value)

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()
