"""
S3 Object Store — boto3 client for AWS S3 and MinIO.

boto3 is blocking, so every call runs in a worker thread and is awaited as a
single result. Listings are pulled one page at a time.
"""

import asyncio
import logging
from typing import Any, AsyncIterator, BinaryIO, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from podstore.interfaces.object_store import (
    ObjectStoreClient, ObjectEntry, ObjectData, ObjectStoreError, ObjectNotFound,
)

logger = logging.getLogger("podstore.s3")

# S3 DeleteObjects accepts at most 1000 keys per request
DELETE_BATCH_SIZE = 1000
NOT_FOUND_CODES = {"NoSuchKey", "404", "NotFound"}


class S3ObjectStore(ObjectStoreClient):
    """S3/MinIO backed object store."""

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        access_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        region: str = "us-east-1",
        url_style: str = "path",
        client: Any = None,
    ):
        if client is None:
            client = boto3.client(
                "s3",
                endpoint_url=endpoint_url,
                region_name=region,
                aws_access_key_id=access_key,
                aws_secret_access_key=secret_key,
                config=Config(s3={"addressing_style": url_style}),
            )
        self.client = client

    async def get_object(self, bucket: str, key: str) -> BinaryIO:
        try:
            response = await asyncio.to_thread(self.client.get_object, Bucket=bucket, Key=key)
        except ClientError as e:
            if e.response["Error"]["Code"] in NOT_FOUND_CODES:
                raise ObjectNotFound(bucket, key) from e
            raise
        return response["Body"]

    async def put_object(self, bucket: str, key: str, data: ObjectData) -> None:
        if isinstance(data, (bytes, bytearray)):
            await asyncio.to_thread(self.client.put_object, Bucket=bucket, Key=key, Body=bytes(data))
        else:
            # Streams of unknown length go through the managed (multipart) upload
            await asyncio.to_thread(self.client.upload_fileobj, data, bucket, key)

    async def list_objects(
        self,
        bucket: str,
        prefix: str,
        recursive: bool = False,
    ) -> AsyncIterator[ObjectEntry]:
        kwargs = {"Bucket": bucket, "Prefix": prefix}
        if not recursive:
            kwargs["Delimiter"] = "/"

        pages = iter(self.client.get_paginator("list_objects_v2").paginate(**kwargs))
        while True:
            page = await asyncio.to_thread(next, pages, None)
            if page is None:
                break
            for obj in page.get("Contents", []) or []:
                key = obj.get("Key")
                if key:
                    yield ObjectEntry(name=key, size=obj.get("Size", 0))
            for common in page.get("CommonPrefixes", []) or []:
                sub_prefix = common.get("Prefix")
                if sub_prefix:
                    yield ObjectEntry(name=sub_prefix, is_prefix=True)

    async def remove_object(self, bucket: str, key: str) -> None:
        await asyncio.to_thread(self.client.delete_object, Bucket=bucket, Key=key)

    async def remove_objects(self, bucket: str, keys: list[str]) -> None:
        failed: list[str] = []
        for i in range(0, len(keys), DELETE_BATCH_SIZE):
            chunk = keys[i : i + DELETE_BATCH_SIZE]
            response = await asyncio.to_thread(
                self.client.delete_objects,
                Bucket=bucket,
                Delete={"Objects": [{"Key": key} for key in chunk], "Quiet": True},
            )
            for error in response.get("Errors", []) or []:
                logger.warning(
                    f"Could not delete {bucket}/{error.get('Key')}: "
                    f"{error.get('Code')} {error.get('Message', '')}"
                )
                failed.append(error.get("Key", ""))

        if failed:
            raise ObjectStoreError(
                f"Failed to delete {len(failed)} of {len(keys)} objects in {bucket}: {failed[:10]}",
                code="DeleteObjectsFailed",
            )
