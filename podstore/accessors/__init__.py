from podstore.accessors.minio_data_accessor import MinioDataAccessor, METADATA_SUFFIX, key_for

__all__ = ["MinioDataAccessor", "METADATA_SUFFIX", "key_for"]
