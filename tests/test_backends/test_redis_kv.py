"""Tests for Redis KV storage backend."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from paged_store.backends.kv.redis import RedisKVStore
from paged_store.exceptions import ConfigError
from paged_store.protocols import KVStore


@pytest.fixture
def client() -> MagicMock:
    """Create a mock asyncio Redis client."""
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    return client


class TestRedisKVStore:
    """Tests for RedisKVStore."""

    def test_requires_url_or_client(self) -> None:
        """Missing connection settings raise ConfigError."""
        with pytest.raises(ConfigError, match="redis_url"):
            RedisKVStore()

    def test_builds_client_from_url(self) -> None:
        """A URL builds a text-decoding client."""
        with patch("paged_store.backends.kv.redis.Redis") as redis_cls:
            store = RedisKVStore(redis_url="redis://localhost:6379/0")

        redis_cls.from_url.assert_called_once_with(
            "redis://localhost:6379/0", decode_responses=True
        )
        assert store.redis_url == "redis://localhost:6379/0"

    def test_satisfies_protocol(self, client) -> None:
        """RedisKVStore is a KVStore."""
        assert isinstance(RedisKVStore(client=client), KVStore)

    @pytest.mark.asyncio
    async def test_set_passes_through(self, client) -> None:
        """set issues a single SET."""
        store = RedisKVStore(client=client)
        await store.set("grid-0", "[1, 2]")
        client.set.assert_awaited_once_with("grid-0", "[1, 2]")

    @pytest.mark.asyncio
    async def test_get_returns_text(self, client) -> None:
        """get returns the stored text."""
        client.get.return_value = "[1, 2]"
        store = RedisKVStore(client=client)
        assert await store.get("grid-0") == "[1, 2]"
        client.get.assert_awaited_once_with("grid-0")

    @pytest.mark.asyncio
    async def test_get_decodes_bytes(self, client) -> None:
        """Bytes from a non-decoding client are decoded."""
        client.get.return_value = b"true"
        store = RedisKVStore(client=client)
        assert await store.get("grid-0") == "true"

    @pytest.mark.asyncio
    async def test_get_missing(self, client) -> None:
        """Missing keys come back as None."""
        store = RedisKVStore(client=client)
        assert await store.get("grid-9") is None

    @pytest.mark.asyncio
    async def test_errors_propagate(self, client) -> None:
        """Client errors are not swallowed."""
        client.get.side_effect = ConnectionError("refused")
        store = RedisKVStore(client=client)
        with pytest.raises(ConnectionError):
            await store.get("grid-0")

    @pytest.mark.asyncio
    async def test_close(self, client) -> None:
        """close releases the client."""
        store = RedisKVStore(client=client)
        await store.close()
        client.aclose.assert_awaited_once()
