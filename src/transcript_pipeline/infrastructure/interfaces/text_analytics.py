"""Abstract interfaces for text analytics backends."""

from abc import ABC, abstractmethod

from transcript_pipeline.domain.models import MedicalEntity, SentimentResult


class TextAnalyticsService(ABC):
    """Sentiment detection over plain text."""

    @abstractmethod
    def detect_sentiment(self, text: str, language_code: str) -> SentimentResult:
        """
        Detects the dominant sentiment of the text.

        Raises:
            RemoteError: If the service call fails.
        """


class MedicalTextAnalyticsService(ABC):
    """Entity detection over clinical text."""

    @abstractmethod
    def detect_entities(self, text: str) -> list[MedicalEntity]:
        """
        Detects medical entities in the text.

        Raises:
            RemoteError: If the service call fails.
        """
