"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        """
        Uploads a file to storage.

        Args:
            bucket_name: The storage bucket name.
            object_name: The destination key in storage.
            data: File-like object containing the data.
            size: Size of the file in bytes.
            content_type: MIME type of the file.

        Raises:
            RemoteError: If the upload fails.
        """

    @abstractmethod
    def download(self, bucket_name: str, object_name: str) -> bytes:
        """
        Downloads an object from storage.

        Args:
            bucket_name: The storage bucket name.
            object_name: The object key in storage.

        Returns:
            The object contents as bytes.

        Raises:
            RemoteError: If the download fails.
        """
