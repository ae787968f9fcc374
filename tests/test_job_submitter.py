import pytest

from transcript_pipeline.domain import JobStatus, StorageRef
from transcript_pipeline.domain.job_submitter import JobSubmitter, generate_job_name
from transcript_pipeline.exceptions import RemoteError

from .fakes import FakeTranscriptionService


class TestJobSubmitter:
    def test_submit_sends_request_and_returns_queued_job(self):
        service = FakeTranscriptionService()
        source = StorageRef(bucket="audio-in", key="audio/J1.wav")

        job = JobSubmitter(service, "en-US").submit(source, "out", "transcripts/", "J1")

        assert service.started == [
            {
                "job_name": "J1",
                "media_uri": "s3://audio-in/audio/J1.wav",
                "output_bucket": "out",
                "output_key": "transcripts/",
                "language_code": "en-US",
            }
        ]
        assert job.name == "J1"
        assert job.source_uri == source
        assert job.status is JobStatus.QUEUED
        assert job.result_uri is None

    def test_remote_rejection_surfaces_unchanged(self):
        service = FakeTranscriptionService()
        service.fail_start = True

        with pytest.raises(RemoteError) as exc_info:
            JobSubmitter(service, "en-US").submit(
                StorageRef(bucket="audio-in", key="audio/J1.wav"), "out", "transcripts/", "J1"
            )

        assert exc_info.value.operation == "start_transcription_job"
        assert "ConflictException" in exc_info.value.message
        assert service.started == []


def test_generated_job_names_are_unique_and_alphanumeric():
    names = {generate_job_name() for _ in range(100)}
    assert len(names) == 100
    assert all(name.isalnum() for name in names)
