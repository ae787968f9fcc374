import pytest

from transcript_pipeline.domain import MedicalEntity, Transcript
from transcript_pipeline.domain.transcript_analyzer import TranscriptAnalyzer, truncate_utf8
from transcript_pipeline.exceptions import RemoteError

from .fakes import FakeMedicalService, FakeSentimentService


class TestTranscriptAnalyzer:
    def test_analyze_uses_configured_language(self):
        sentiment = FakeSentimentService("NEGATIVE")
        analyzer = TranscriptAnalyzer(sentiment, language_code="es")

        result = analyzer.analyze(Transcript(text="hola"))

        assert result.sentiment == "NEGATIVE"
        assert result.scores.positive == 0.9
        assert sentiment.calls == [("hola", "es")]

    def test_long_transcripts_are_truncated(self):
        sentiment = FakeSentimentService()
        analyzer = TranscriptAnalyzer(sentiment, max_text_bytes=10)

        analyzer.analyze(Transcript(text="a" * 50))

        assert sentiment.calls[0][0] == "a" * 10

    def test_remote_failure_propagates(self):
        sentiment = FakeSentimentService()
        sentiment.fail = True

        with pytest.raises(RemoteError) as exc_info:
            TranscriptAnalyzer(sentiment).analyze(Transcript(text="hi"))

        assert exc_info.value.operation == "detect_sentiment"

    def test_detect_medical_entities(self):
        entity = MedicalEntity(text="aspirin", category="MEDICATION", type="GENERIC_NAME", score=0.9)
        medical = FakeMedicalService([entity])

        entities = TranscriptAnalyzer(FakeSentimentService(), medical).detect_medical_entities("take aspirin")

        assert entities == [entity]
        assert medical.calls == ["take aspirin"]


class TestTruncateUtf8:
    def test_short_text_unchanged(self):
        assert truncate_utf8("héllo", 100) == "héllo"

    def test_never_splits_a_character(self):
        # "é" takes two bytes, so a 2-byte budget only fits "h".
        assert truncate_utf8("hé", 2) == "h"
