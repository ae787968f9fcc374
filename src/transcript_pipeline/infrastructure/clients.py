"""Process-wide container of remote service clients."""

from dataclasses import dataclass

from .interfaces import (
    MedicalTextAnalyticsService,
    StorageClient,
    TextAnalyticsService,
    TranscriptionService,
)


@dataclass(frozen=True)
class SharedClients:
    """
    Service handles built once at startup.

    The handles are safe for concurrent use, so pipeline runs share them
    without any lock.
    """

    storage: StorageClient
    transcription: TranscriptionService
    sentiment: TextAnalyticsService
    medical: MedicalTextAnalyticsService
