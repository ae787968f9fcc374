import pytest
from pydantic import ValidationError

from transcript_pipeline.domain import Job, JobStatus, MedicalEntity, StorageRef


def _job() -> Job:
    return Job(
        name="J1",
        source_uri=StorageRef(bucket="audio-in", key="audio/J1.wav"),
        output_bucket="out",
        output_key_prefix="transcripts/",
    )


class TestStorageRef:
    def test_is_immutable(self):
        ref = StorageRef(bucket="b", key="k")
        with pytest.raises(ValidationError):
            ref.key = "other"

    @pytest.mark.parametrize("bucket,key", [("", "k"), ("b", ""), ("a/b", "k"), ("s3:", "k")])
    def test_rejects_invalid_parts(self, bucket, key):
        with pytest.raises(ValidationError):
            StorageRef(bucket=bucket, key=key)


class TestJobStatus:
    def test_terminal_states(self):
        assert {s for s in JobStatus if s.is_terminal} == {
            JobStatus.COMPLETED,
            JobStatus.FAILED,
            JobStatus.NOT_FOUND,
        }


class TestJob:
    def test_new_job_is_queued_without_result(self):
        job = _job()
        assert job.status is JobStatus.QUEUED
        assert job.result_uri is None

    def test_complete_sets_result(self):
        job = _job()
        ref = StorageRef(bucket="out", key="transcripts/J1.json")
        job.complete(ref)
        assert job.status is JobStatus.COMPLETED
        assert job.result_uri == ref

    def test_transition_clears_result(self):
        job = _job()
        job.complete(StorageRef(bucket="out", key="transcripts/J1.json"))
        job.transition(JobStatus.FAILED)
        assert job.result_uri is None

    def test_completed_job_requires_result(self):
        with pytest.raises(ValidationError):
            Job(
                name="J1",
                source_uri=StorageRef(bucket="audio-in", key="audio/J1.wav"),
                output_bucket="out",
                output_key_prefix="transcripts/",
                status=JobStatus.COMPLETED,
            )

    @pytest.mark.parametrize("status", [JobStatus.QUEUED, JobStatus.IN_PROGRESS, JobStatus.FAILED])
    def test_unfinished_job_rejects_result(self, status):
        with pytest.raises(ValidationError):
            Job(
                name="J1",
                source_uri=StorageRef(bucket="audio-in", key="audio/J1.wav"),
                output_bucket="out",
                output_key_prefix="transcripts/",
                status=status,
                result_uri=StorageRef(bucket="out", key="transcripts/J1.json"),
            )

    def test_completed_job_with_result_is_accepted(self):
        job = Job(
            name="J1",
            source_uri=StorageRef(bucket="audio-in", key="audio/J1.wav"),
            output_bucket="out",
            output_key_prefix="transcripts/",
            status=JobStatus.COMPLETED,
            result_uri=StorageRef(bucket="out", key="transcripts/J1.json"),
        )
        assert job.result_uri.key == "transcripts/J1.json"

    def test_transition_refuses_completed(self):
        with pytest.raises(ValueError):
            _job().transition(JobStatus.COMPLETED)


class TestMedicalEntity:
    def test_describe(self):
        entity = MedicalEntity(text="aspirin", category="MEDICATION", type="GENERIC_NAME", score=0.987)
        assert entity.describe() == "aspirin [MEDICATION/GENERIC_NAME] score=0.99"

    def test_describe_with_traits(self):
        entity = MedicalEntity(
            text="cough", category="MEDICAL_CONDITION", type="DX_NAME", score=0.5, traits=["SYMPTOM", "NEGATION"]
        )
        assert entity.describe().endswith("traits=SYMPTOM,NEGATION")
