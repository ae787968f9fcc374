"""AWS Comprehend implementations of the text analytics interfaces."""

from botocore.exceptions import BotoCoreError, ClientError

from transcript_pipeline.domain.models import MedicalEntity, SentimentResult, SentimentScore
from transcript_pipeline.exceptions import RemoteError
from transcript_pipeline.logging import setup_logging

from .interfaces import MedicalTextAnalyticsService, TextAnalyticsService

logger = setup_logging()


class ComprehendSentimentService(TextAnalyticsService):
    """Sentiment detection through a boto3 Comprehend client."""

    def __init__(self, client):
        self._client = client

    def detect_sentiment(self, text: str, language_code: str) -> SentimentResult:
        try:
            response = self._client.detect_sentiment(Text=text, LanguageCode=language_code)
        except (BotoCoreError, ClientError) as e:
            logger.exception("Sentiment detection failed")
            raise RemoteError("detect_sentiment", str(e), e) from e

        scores = response.get("SentimentScore") or {}
        return SentimentResult(
            sentiment=response.get("Sentiment", "NEUTRAL"),
            scores=SentimentScore(
                positive=scores.get("Positive", 0.0),
                negative=scores.get("Negative", 0.0),
                neutral=scores.get("Neutral", 0.0),
                mixed=scores.get("Mixed", 0.0),
            ),
        )


class ComprehendMedicalService(MedicalTextAnalyticsService):
    """Medical entity detection through a boto3 Comprehend Medical client."""

    def __init__(self, client):
        self._client = client

    def detect_entities(self, text: str) -> list[MedicalEntity]:
        try:
            response = self._client.detect_entities_v2(Text=text)
        except (BotoCoreError, ClientError) as e:
            logger.exception("Medical entity detection failed")
            raise RemoteError("detect_entities_v2", str(e), e) from e

        return [
            MedicalEntity(
                text=entity.get("Text", ""),
                category=entity.get("Category", ""),
                type=entity.get("Type", ""),
                score=entity.get("Score", 0.0),
                traits=[trait["Name"] for trait in entity.get("Traits", []) if "Name" in trait],
            )
            for entity in response.get("Entities", [])
        ]
