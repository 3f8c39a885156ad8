"""Tests for backend discovery."""

import pytest

from paged_store.backends.kv.memory import MemoryKVStore
from paged_store.backends.kv.redis import RedisKVStore
from paged_store.exceptions import ConfigError
from paged_store.plugins import create_kv_store, discover_backends, get_backend


class TestDiscovery:
    """Tests for entry point discovery."""

    def test_discovers_builtin_kv_backends(self) -> None:
        """Memory and Redis backends are registered."""
        backends = discover_backends("kv")
        assert backends["memory"] is MemoryKVStore
        assert backends["redis"] is RedisKVStore

    def test_unknown_backend(self) -> None:
        """Unknown backends list the available ones."""
        with pytest.raises(ConfigError, match="Available: memory, redis"):
            get_backend("kv", "dynamodb")

    def test_create_memory_store(self) -> None:
        """Extra kwargs are ignored by the memory backend."""
        store = create_kv_store("memory", redis_url=None)
        assert isinstance(store, MemoryKVStore)

    def test_create_redis_store_requires_url(self) -> None:
        """The Redis backend needs a URL."""
        with pytest.raises(ConfigError):
            create_kv_store("redis", redis_url=None)
