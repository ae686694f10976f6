from adapters.aws.s3_object_store import S3ObjectStore
from adapters.aws.minio_factory import build_minio_accessor

__all__ = [
    "S3ObjectStore",
    "build_minio_accessor",
]
