"""Infrastructure layer exports."""

from .aws_comprehend import ComprehendMedicalService, ComprehendSentimentService
from .aws_transcribe import AWSTranscribeService
from .minio_storage import MinioStorageClient

__all__ = [
    "MinioStorageClient",
    "AWSTranscribeService",
    "ComprehendSentimentService",
    "ComprehendMedicalService",
]
