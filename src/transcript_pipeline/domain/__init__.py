"""Domain layer exports."""

from .models import (
    AudioUpload,
    Job,
    JobSnapshot,
    JobStatus,
    MedicalEntity,
    SentimentResult,
    SentimentScore,
    StorageRef,
    Transcript,
)
from .storage_uri import format_storage_uri, parse_storage_uri

__all__ = [
    "AudioUpload",
    "Job",
    "JobSnapshot",
    "JobStatus",
    "MedicalEntity",
    "SentimentResult",
    "SentimentScore",
    "StorageRef",
    "Transcript",
    "format_storage_uri",
    "parse_storage_uri",
]
