"""Domain models for the transcription pipeline."""

from enum import Enum

from pydantic import BaseModel, field_validator, model_validator


class StorageRef(BaseModel, frozen=True):
    """A (bucket, key) address of an object in storage."""

    bucket: str
    key: str

    @field_validator("bucket")
    @classmethod
    def _bucket_is_single_segment(cls, value: str) -> str:
        if not value or "/" in value or ":" in value:
            raise ValueError("bucket must be a non-empty name without '/' or ':'")
        return value

    @field_validator("key")
    @classmethod
    def _key_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("key must not be empty")
        return value


class JobStatus(str, Enum):
    """Lifecycle states of a transcription job."""

    QUEUED = "QUEUED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    NOT_FOUND = "NOT_FOUND"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.COMPLETED, JobStatus.FAILED, JobStatus.NOT_FOUND)


class JobSnapshot(BaseModel, frozen=True):
    """A single status observation returned by the transcription service."""

    status: JobStatus
    transcript_uri: str | None = None
    failure_reason: str | None = None


class Job(BaseModel):
    """
    One transcription request tracked by name.

    result_uri is set if and only if status is COMPLETED; use transition()
    and complete() rather than assigning the fields directly.
    """

    name: str
    source_uri: StorageRef
    output_bucket: str
    output_key_prefix: str
    status: JobStatus = JobStatus.QUEUED
    result_uri: StorageRef | None = None

    @model_validator(mode="after")
    def _result_only_when_completed(self) -> "Job":
        if (self.status is JobStatus.COMPLETED) != (self.result_uri is not None):
            raise ValueError("result_uri must be set if and only if status is COMPLETED")
        return self

    def transition(self, status: JobStatus) -> None:
        """Moves the job to a non-completed state."""
        if status is JobStatus.COMPLETED:
            raise ValueError("use complete() to mark a job as completed")
        self.status = status
        self.result_uri = None

    def complete(self, result_uri: StorageRef) -> None:
        """Marks the job completed with the location of its result."""
        self.status = JobStatus.COMPLETED
        self.result_uri = result_uri


class Transcript(BaseModel, frozen=True):
    """Plain transcript text extracted from a job result."""

    text: str


class SentimentScore(BaseModel, frozen=True):
    """Per-class confidence scores for a sentiment prediction."""

    positive: float = 0.0
    negative: float = 0.0
    neutral: float = 0.0
    mixed: float = 0.0


class SentimentResult(BaseModel, frozen=True):
    """Sentiment label and scores for a transcript."""

    sentiment: str
    scores: SentimentScore


class MedicalEntity(BaseModel, frozen=True):
    """An entity detected in medical text."""

    text: str
    category: str
    type: str
    score: float
    traits: list[str] = []

    def describe(self) -> str:
        """Renders the entity as a single human-readable line."""
        line = f"{self.text} [{self.category}/{self.type}] score={self.score:.2f}"
        if self.traits:
            line = f"{line} traits={','.join(self.traits)}"
        return line


class AudioUpload(BaseModel, frozen=True):
    """An audio file received by the upload endpoint."""

    filename: str
    content: bytes
    content_type: str = "audio/wav"
