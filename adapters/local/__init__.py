from adapters.local.memory_object_store import InMemoryObjectStore, StoreOp

__all__ = [
    "InMemoryObjectStore",
    "StoreOp",
]
