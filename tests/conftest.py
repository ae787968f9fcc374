import pytest

from transcript_pipeline.config import PipelineConfig
from transcript_pipeline.domain.job_poller import JobStatusPoller
from transcript_pipeline.domain.job_registry import JobRegistry
from transcript_pipeline.domain.job_submitter import JobSubmitter
from transcript_pipeline.domain.result_extractor import ResultExtractor
from transcript_pipeline.domain.transcript_analyzer import TranscriptAnalyzer
from transcript_pipeline.handlers import AudioUploadHandler

from .fakes import FakeMedicalService, FakeSentimentService, FakeStorage, FakeTranscriptionService


@pytest.fixture
def pipeline_config(tmp_path):
    return PipelineConfig(
        input_bucket="audio-in",
        output_bucket="out",
        poll_interval_seconds=0.0,
        staging_dir=str(tmp_path),
    )


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def transcription(storage):
    return FakeTranscriptionService(storage)


@pytest.fixture
def sentiment():
    return FakeSentimentService()


@pytest.fixture
def medical():
    return FakeMedicalService()


@pytest.fixture
def registry():
    return JobRegistry()


@pytest.fixture
def analyzer(sentiment, medical):
    return TranscriptAnalyzer(sentiment, medical)


@pytest.fixture
def handler(storage, transcription, analyzer, registry, pipeline_config):
    return AudioUploadHandler(
        storage=storage,
        submitter=JobSubmitter(transcription, pipeline_config.transcription_language),
        poller=JobStatusPoller(transcription, poll_interval=pipeline_config.poll_interval_seconds),
        extractor=ResultExtractor(storage),
        analyzer=analyzer,
        registry=registry,
        config=pipeline_config,
    )
