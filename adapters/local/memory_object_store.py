"""
Local Object Store — in memory.

For local development and tests. No S3 dependency.
Keys live in a plain dict per bucket; listing follows S3 semantics, so a
non-recursive listing rolls deeper keys up into common prefixes.

Every call is recorded in ``ops`` so callers can check the order in which
an accessor talks to the store, and ``fail_on`` makes chosen operations
raise.
"""

import io
from dataclasses import dataclass
from typing import AsyncIterator, BinaryIO, Optional

from podstore.interfaces.object_store import (
    ObjectStoreClient, ObjectEntry, ObjectData, ObjectNotFound,
)


@dataclass
class StoreOp:
    name: str
    args: tuple[object, ...]


class InMemoryObjectStore(ObjectStoreClient):
    """Dict-backed object store."""

    def __init__(self):
        self.buckets: dict[str, dict[str, bytes]] = {}
        self.ops: list[StoreOp] = []
        self.fail_on: dict[str, Exception] = {}

    def _record(self, name: str, *args: object) -> None:
        self.ops.append(StoreOp(name, args))
        error: Optional[Exception] = self.fail_on.get(name)
        if error is not None:
            raise error

    def _bucket(self, bucket: str) -> dict[str, bytes]:
        return self.buckets.setdefault(bucket, {})

    def op_names(self) -> list[str]:
        return [op.name for op in self.ops]

    async def get_object(self, bucket: str, key: str) -> BinaryIO:
        self._record("get_object", bucket, key)
        objects = self._bucket(bucket)
        if key not in objects:
            raise ObjectNotFound(bucket, key)
        return io.BytesIO(objects[key])

    async def put_object(self, bucket: str, key: str, data: ObjectData) -> None:
        self._record("put_object", bucket, key)
        if not isinstance(data, (bytes, bytearray)):
            data = data.read()
        self._bucket(bucket)[key] = bytes(data)

    async def list_objects(
        self,
        bucket: str,
        prefix: str,
        recursive: bool = False,
    ) -> AsyncIterator[ObjectEntry]:
        self._record("list_objects", bucket, prefix, recursive)
        objects = dict(self._bucket(bucket))
        seen_prefixes: set[str] = set()
        for key in sorted(objects):
            if not key.startswith(prefix):
                continue
            rest = key[len(prefix):]
            if not recursive and "/" in rest:
                sub_prefix = prefix + rest[: rest.index("/") + 1]
                if sub_prefix not in seen_prefixes:
                    seen_prefixes.add(sub_prefix)
                    yield ObjectEntry(name=sub_prefix, is_prefix=True)
                continue
            yield ObjectEntry(name=key, size=len(objects[key]))

    async def remove_object(self, bucket: str, key: str) -> None:
        self._record("remove_object", bucket, key)
        self._bucket(bucket).pop(key, None)

    async def remove_objects(self, bucket: str, keys: list[str]) -> None:
        self._record("remove_objects", bucket, list(keys))
        objects = self._bucket(bucket)
        for key in keys:
            objects.pop(key, None)
