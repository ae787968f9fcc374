"""Infrastructure interface exports."""

from .storage import StorageClient
from .text_analytics import MedicalTextAnalyticsService, TextAnalyticsService
from .transcription_service import TranscriptionService

__all__ = [
    "StorageClient",
    "TranscriptionService",
    "TextAnalyticsService",
    "MedicalTextAnalyticsService",
]
