"""Pytest configuration and fixtures."""

import pytest

from paged_store.backends.kv.memory import MemoryKVStore
from paged_store.observability import clear_metric_callbacks
from paged_store.storage import PagedStorage


@pytest.fixture
def sample_config_dict():
    """Sample configuration dictionary for testing."""
    return {
        "base_key": "grid",
        "kv": {"backend": "memory"},
        "logging": {"level": "DEBUG", "format": "text"},
    }


@pytest.fixture
def kv_store() -> MemoryKVStore:
    """Create a memory KV store."""
    return MemoryKVStore()


@pytest.fixture
def storage(kv_store) -> PagedStorage:
    """Create paged storage over the memory store."""
    return PagedStorage(kv_store, "grid")


@pytest.fixture(autouse=True)
def reset_metric_callbacks():
    """Keep metric callbacks from leaking between tests."""
    yield
    clear_metric_callbacks()
