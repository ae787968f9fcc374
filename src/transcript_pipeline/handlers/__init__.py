"""Handler exports."""

from .upload_handler import AudioUploadHandler

__all__ = ["AudioUploadHandler"]
