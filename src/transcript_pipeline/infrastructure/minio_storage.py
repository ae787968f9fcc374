"""MinIO implementation of the StorageClient interface."""

from typing import BinaryIO

from minio import Minio

from transcript_pipeline.exceptions import RemoteError
from transcript_pipeline.logging import setup_logging

from .interfaces import StorageClient

logger = setup_logging()


class MinioStorageClient(StorageClient):
    """Handles object storage operations against any S3-compatible endpoint."""

    def __init__(self, client: Minio):
        self._client = client

    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        try:
            self._client.put_object(
                bucket_name=bucket_name,
                object_name=object_name,
                data=data,
                length=size,
                content_type=content_type,
            )
            logger.info(
                "File uploaded to storage",
                extra={
                    "bucket_name": bucket_name,
                    "object_name": object_name,
                    "size": size,
                },
            )
        except Exception as e:
            logger.exception(
                "Storage upload failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise RemoteError("put_object", str(e), e) from e

    def download(self, bucket_name: str, object_name: str) -> bytes:
        try:
            response = self._client.get_object(bucket_name, object_name)
            try:
                data = response.read()
            finally:
                response.close()
                response.release_conn()
            logger.info(
                "File downloaded from storage",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            return data
        except Exception as e:
            logger.exception(
                "Storage download failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise RemoteError("get_object", str(e), e) from e
