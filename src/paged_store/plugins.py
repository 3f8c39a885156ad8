"""Plugin discovery via Python entry points."""

from importlib.metadata import entry_points
from typing import Any

from paged_store.exceptions import ConfigError
from paged_store.protocols import KVStore

BACKEND_GROUPS = {
    "kv": "paged_store.backends.kv",
}


def discover_backends(group: str) -> dict[str, Any]:
    """Discover all registered backends for a given group.

    Args:
        group: The backend group name (kv)

    Returns:
        Dictionary mapping backend names to their classes
    """
    full_group = BACKEND_GROUPS.get(group, group)
    eps = entry_points(group=full_group)
    return {ep.name: ep.load() for ep in eps}


def get_backend(group: str, name: str) -> Any:
    """Get a specific backend class by group and name.

    Raises:
        ConfigError: If the backend is not found
    """
    backends = discover_backends(group)
    if name not in backends:
        available = ", ".join(sorted(backends.keys())) or "(none)"
        raise ConfigError(
            f"Backend '{name}' not found in group '{group}'. Available: {available}"
        )
    return backends[name]


def create_kv_store(backend: str, **kwargs: Any) -> KVStore:
    """Create a KVStore instance.

    Args:
        backend: The backend name (e.g., "memory", "redis")
        **kwargs: Backend-specific configuration

    Returns:
        A KVStore implementation
    """
    cls = get_backend("kv", backend)
    return cls(**kwargs)
