"""
Object Store Client Interface

Cloud-agnostic abstraction for a flat key-value object store.
Implementations: S3ObjectStore (S3/MinIO), InMemoryObjectStore (local), etc.

The store has no notion of directories. Hierarchy only exists in the
structure of the key strings and in prefix listing.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import AsyncIterator, BinaryIO, Union

ObjectData = Union[bytes, BinaryIO]


@dataclass(frozen=True)
class ObjectEntry:
    """One entry of a listing."""

    name: str
    is_prefix: bool = False     # common prefix rolled up by a non-recursive listing
    size: int = 0


class ObjectStoreClient(ABC):
    """
    Abstract base class for object storage.

    Every call is independent. The client may be shared by any number of
    concurrent callers.
    """

    @abstractmethod
    async def get_object(self, bucket: str, key: str) -> BinaryIO:
        """
        Open an object for reading.

        Returns:
            A readable binary stream over the object's bytes

        Raises:
            ObjectNotFound: If the key doesn't exist
        """
        ...

    @abstractmethod
    async def put_object(self, bucket: str, key: str, data: ObjectData) -> None:
        """
        Store an object, overwriting any existing one.

        Args:
            bucket: Target bucket
            key: Object key
            data: Raw bytes or a readable binary stream
        """
        ...

    @abstractmethod
    def list_objects(
        self,
        bucket: str,
        prefix: str,
        recursive: bool = False,
    ) -> AsyncIterator[ObjectEntry]:
        """
        List the keys starting with ``prefix``.

        Non-recursive listings return only keys with no "/" after the prefix;
        deeper keys are rolled up into one ``is_prefix`` entry per
        sub-prefix. Recursive listings return every key.
        """
        ...

    @abstractmethod
    async def remove_object(self, bucket: str, key: str) -> None:
        """Delete an object. Deleting a missing key is not an error."""
        ...

    @abstractmethod
    async def remove_objects(self, bucket: str, keys: list[str]) -> None:
        """
        Delete many objects in bulk.

        Raises:
            ObjectStoreError: If the store refused to delete any of the keys
        """
        ...


class ObjectStoreError(Exception):
    """Raised when the object store rejects an operation."""

    def __init__(self, message: str, code: str = ""):
        super().__init__(message)
        self.code = code


class ObjectNotFound(ObjectStoreError):
    """Raised when a requested object doesn't exist."""

    def __init__(self, bucket: str, key: str):
        super().__init__(f"NoSuchKey: {bucket}/{key}", code="NoSuchKey")
        self.bucket = bucket
        self.key = key
