"""
Podstore Interfaces — storage-agnostic contracts.

Core code depends on these interfaces only.
Store-specific implementations live in adapters/.
"""

from podstore.interfaces.object_store import (
    ObjectStoreClient, ObjectEntry, ObjectStoreError, ObjectNotFound,
)
from podstore.interfaces.identifier_strategy import IdentifierStrategy
from podstore.interfaces.data_accessor import DataAccessor

__all__ = [
    "ObjectStoreClient", "ObjectEntry", "ObjectStoreError", "ObjectNotFound",
    "IdentifierStrategy",
    "DataAccessor",
]
