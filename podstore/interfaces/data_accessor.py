"""
Data Accessor Interface

Storage-agnostic contract between the resource store and a backend.
Implementations: MinioDataAccessor (S3/MinIO), etc.

Accessors read and write raw data and metadata; they do not validate
requests or negotiate content.
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator, BinaryIO

from podstore.models.identifier import ResourceIdentifier
from podstore.models.representation import Representation, RepresentationMetadata
from podstore.util.guarded_stream import GuardedStream


class DataAccessor(ABC):
    """Abstract base class for resource data access."""

    @abstractmethod
    async def can_handle(self, representation: Representation) -> None:
        """
        Check whether the accessor can store this representation.

        Raises:
            UnsupportedMediaTypeHttpError: If it can't
        """
        ...

    @abstractmethod
    async def get_data(self, identifier: ResourceIdentifier) -> GuardedStream:
        """
        Open the resource's data.

        Raises:
            NotFoundHttpError: If the resource can't be read
        """
        ...

    @abstractmethod
    async def get_metadata(self, identifier: ResourceIdentifier) -> RepresentationMetadata:
        """
        Read the resource's stored metadata.

        Raises:
            NotFoundHttpError: If the resource can't be read
        """
        ...

    @abstractmethod
    def get_children(
        self,
        identifier: ResourceIdentifier,
    ) -> AsyncIterator[RepresentationMetadata]:
        """
        Yield one metadata placeholder per direct child of a container.

        The placeholders only carry the child's identifier.
        """
        ...

    @abstractmethod
    async def write_document(
        self,
        identifier: ResourceIdentifier,
        data: BinaryIO,
        metadata: RepresentationMetadata,
    ) -> None:
        """Write a document's data and metadata, metadata first."""
        ...

    @abstractmethod
    async def write_container(
        self,
        identifier: ResourceIdentifier,
        metadata: RepresentationMetadata,
    ) -> None:
        """Write a container's metadata and its empty marker object."""
        ...

    @abstractmethod
    async def write_metadata(
        self,
        identifier: ResourceIdentifier,
        metadata: RepresentationMetadata,
    ) -> None:
        """Replace only the stored metadata, leaving data untouched."""
        ...

    @abstractmethod
    async def delete_resource(self, identifier: ResourceIdentifier) -> None:
        """Remove the resource, and for containers everything below it."""
        ...
