"""Core business logic for transcript analysis."""

from transcript_pipeline.infrastructure.interfaces.text_analytics import (
    MedicalTextAnalyticsService,
    TextAnalyticsService,
)
from transcript_pipeline.logging import setup_logging

from .models import MedicalEntity, SentimentResult, Transcript

logger = setup_logging()

DEFAULT_MAX_TEXT_BYTES = 5000


def truncate_utf8(text: str, max_bytes: int) -> str:
    """Cuts text to at most max_bytes of UTF-8 without splitting a character."""
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


class TranscriptAnalyzer:
    """Runs sentiment and medical entity analysis on text."""

    def __init__(
        self,
        sentiment_service: TextAnalyticsService,
        medical_service: MedicalTextAnalyticsService | None = None,
        language_code: str = "en",
        max_text_bytes: int = DEFAULT_MAX_TEXT_BYTES,
    ):
        self._sentiment = sentiment_service
        self._medical = medical_service
        self._language_code = language_code
        self._max_text_bytes = max_text_bytes

    def analyze(self, transcript: Transcript) -> SentimentResult:
        """
        Detects the sentiment of a transcript.

        Args:
            transcript: The transcript to analyze.

        Returns:
            SentimentResult with the label and per-class scores.

        Raises:
            RemoteError: If the analytics service call fails.
        """
        text = truncate_utf8(transcript.text, self._max_text_bytes)
        if len(text) < len(transcript.text):
            logger.info(
                "Transcript truncated for analysis",
                extra={"original_chars": len(transcript.text), "sent_chars": len(text)},
            )

        result = self._sentiment.detect_sentiment(text, self._language_code)

        logger.info(
            "Sentiment detected",
            extra={
                "sentiment": result.sentiment,
                "scores": result.scores.model_dump(),
            },
        )
        return result

    def detect_medical_entities(self, text: str) -> list[MedicalEntity]:
        """Detects medical entities in free text."""
        if self._medical is None:
            raise RuntimeError("No medical analytics service configured")

        entities = self._medical.detect_entities(text)
        logger.info("Medical entities detected", extra={"entity_count": len(entities)})
        return entities
