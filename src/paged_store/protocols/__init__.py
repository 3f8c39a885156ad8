"""Protocol interfaces for pluggable backends."""

from paged_store.protocols.kv_store import KVStore

__all__ = ["KVStore"]
