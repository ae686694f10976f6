"""
Wires a MinioDataAccessor to a real S3/MinIO endpoint.

Usage:
    from adapters.aws.minio_factory import build_minio_accessor
    from podstore.config import load_options

    accessor = build_minio_accessor(load_options("storage.yaml"))
"""

import logging

from adapters.aws.s3_object_store import S3ObjectStore
from podstore.accessors.minio_data_accessor import MinioDataAccessor
from podstore.config import MinioAccessorOptions

logger = logging.getLogger("podstore.s3")


def build_minio_accessor(options: MinioAccessorOptions) -> MinioDataAccessor:
    """Create the store client for ``options`` and bind an accessor to its bucket."""
    client = S3ObjectStore(
        endpoint_url=options.endpoint_url,
        access_key=options.access_key,
        secret_key=options.secret_key,
    )
    logger.info(f"Using bucket '{options.bucket}' at {options.endpoint_url}")
    return MinioDataAccessor(
        client=client,
        bucket=options.bucket,
        identifier_strategy=options.identifier_strategy,
    )
