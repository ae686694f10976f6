"""
MinIO / S3 Data Accessor.

Maps the hierarchical identifier namespace onto a flat object store.

Key layout (for an identifier path with one leading slash stripped, P):
  P        content (zero bytes for a container marker)
  P.meta   metadata, as Turtle with the identifier path as base

Containers only exist as key prefixes: listing children and deleting a
container are both prefix listings. Content and metadata are two separate
objects written by two separate calls; the store offers no transaction
spanning both, so metadata is always written first.
"""

import asyncio
import logging
from typing import AsyncIterator, BinaryIO, Optional

from podstore.errors.handler import StoreErrorHandler
from podstore.errors.models import NotFoundHttpError, UnsupportedMediaTypeHttpError
from podstore.interfaces.data_accessor import DataAccessor
from podstore.interfaces.identifier_strategy import IdentifierStrategy
from podstore.interfaces.object_store import ObjectStoreClient
from podstore.models.identifier import ResourceIdentifier
from podstore.models.representation import Representation, RepresentationMetadata
from podstore.util.guarded_stream import GuardedStream, guard_stream
from podstore.util.paths import ensure_trailing_slash
from podstore.util.quads import parse_quads, serialize_quads

logger = logging.getLogger("podstore.accessor")

METADATA_SUFFIX = ".meta"


def key_for(identifier: ResourceIdentifier, is_metadata: bool = False) -> str:
    """Object key holding the identifier's content, or its metadata."""
    path = identifier.path
    key = path[1:] if path.startswith("/") else path
    if is_metadata:
        key += METADATA_SUFFIX
    return key


class MinioDataAccessor(DataAccessor):
    """DataAccessor that stores resources in one bucket of an S3-compatible store."""

    def __init__(
        self,
        client: ObjectStoreClient,
        bucket: str,
        identifier_strategy: IdentifierStrategy,
        error_handler: Optional[StoreErrorHandler] = None,
    ):
        self.client = client
        self.bucket = bucket
        self.identifier_strategy = identifier_strategy
        self.error_handler = error_handler or StoreErrorHandler()

    def _prefix_for(self, identifier: ResourceIdentifier) -> str:
        key = key_for(identifier)
        # The root container's key is empty; it lists the whole bucket
        return ensure_trailing_slash(key) if key.strip("/") else ""

    # --- Reads ---

    async def can_handle(self, representation: Representation) -> None:
        if not representation.binary:
            raise UnsupportedMediaTypeHttpError("Only binary data is supported.")

    async def get_data(self, identifier: ResourceIdentifier) -> GuardedStream:
        try:
            stream = await self.client.get_object(self.bucket, key_for(identifier))
        except Exception as e:
            failure = self.error_handler.handle(e, context=f"get_data {identifier.path}")
            logger.warning(
                f"Data not found for {identifier.path} "
                f"({failure.error_code}, retryable={failure.retryable}: {e})"
            )
            raise NotFoundHttpError(f"{identifier.path} not found") from e
        return guard_stream(stream)

    async def get_metadata(self, identifier: ResourceIdentifier) -> RepresentationMetadata:
        try:
            stream = await self.client.get_object(self.bucket, key_for(identifier, True))
            with guard_stream(stream) as guarded:
                raw = await asyncio.to_thread(guarded.read)
            triples = parse_quads(raw, identifier.path)
        except Exception as e:
            failure = self.error_handler.handle(e, context=f"get_metadata {identifier.path}")
            logger.warning(
                f"Metadata not found for {identifier.path} "
                f"({failure.error_code}, retryable={failure.retryable}: {e})"
            )
            raise NotFoundHttpError(f"{identifier.path} not found") from e
        return RepresentationMetadata(identifier).add_triples(triples)

    async def get_children(
        self,
        identifier: ResourceIdentifier,
    ) -> AsyncIterator[RepresentationMetadata]:
        prefix = self._prefix_for(identifier)

        # Drain the whole listing before yielding anything
        names = [
            entry.name
            async for entry in self.client.list_objects(self.bucket, prefix, recursive=False)
            if entry.name != prefix and not entry.name.endswith(METADATA_SUFFIX)
        ]

        for name in names:
            yield RepresentationMetadata(ResourceIdentifier("/" + name))

    # --- Writes ---

    async def _write_metadata_object(
        self,
        identifier: ResourceIdentifier,
        metadata: RepresentationMetadata,
    ) -> None:
        await self.client.put_object(
            self.bucket,
            key_for(identifier, True),
            serialize_quads(metadata.triples()),
        )

    async def write_document(
        self,
        identifier: ResourceIdentifier,
        data: BinaryIO,
        metadata: RepresentationMetadata,
    ) -> None:
        await self._write_metadata_object(identifier, metadata)
        await self.client.put_object(self.bucket, key_for(identifier), guard_stream(data))

    async def write_container(
        self,
        identifier: ResourceIdentifier,
        metadata: RepresentationMetadata,
    ) -> None:
        await self._write_metadata_object(identifier, metadata)
        key = key_for(identifier)
        if key:
            await self.client.put_object(self.bucket, key, b"")

    async def write_metadata(
        self,
        identifier: ResourceIdentifier,
        metadata: RepresentationMetadata,
    ) -> None:
        await self._write_metadata_object(identifier, metadata)

    # --- Delete ---

    async def _remove_quietly(self, key: str) -> None:
        try:
            await self.client.remove_object(self.bucket, key)
        except Exception as e:
            logger.debug(f"Ignoring failed removal of {key}: {e}")

    async def delete_resource(self, identifier: ResourceIdentifier) -> None:
        await self._remove_quietly(key_for(identifier, True))

        if not self.identifier_strategy.is_container(identifier):
            await self._remove_quietly(key_for(identifier))
            return

        prefix = self._prefix_for(identifier)
        names = [
            entry.name
            async for entry in self.client.list_objects(self.bucket, prefix, recursive=True)
        ]
        if names:
            logger.info(f"Removing {len(names)} objects under {identifier.path}")
            await self.client.remove_objects(self.bucket, names)
