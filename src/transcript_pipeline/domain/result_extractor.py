"""Download and decoding of transcription job results."""

from pydantic import BaseModel, ValidationError

from transcript_pipeline.exceptions import MalformedResult, TranscriptNotFound
from transcript_pipeline.infrastructure.interfaces.storage import StorageClient
from transcript_pipeline.logging import setup_logging

from .models import StorageRef, Transcript
from .storage_uri import format_storage_uri

logger = setup_logging()


class TranscriptAlternative(BaseModel):
    transcript: str | None = None


class TranscribeResults(BaseModel):
    transcripts: list[TranscriptAlternative] = []


class TranscribeOutput(BaseModel):
    """The subset of a Transcribe result document the pipeline reads."""

    jobName: str | None = None
    results: TranscribeResults | None = None


class ResultExtractor:
    """Fetches a job's result document and extracts the transcript text."""

    def __init__(self, storage: StorageClient):
        self._storage = storage

    def fetch(self, ref: StorageRef) -> Transcript:
        """
        Downloads the result at ``ref`` and returns its first transcript.

        Raises:
            RemoteError: If the download fails.
            MalformedResult: If the document is not a valid result document.
            TranscriptNotFound: If the first transcript is missing or empty.
        """
        uri = format_storage_uri(ref)
        data = self._storage.download(ref.bucket, ref.key)
        transcript = self.extract(data, uri)
        logger.info(
            "Transcript extracted",
            extra={"result_uri": uri, "characters": len(transcript.text)},
        )
        return transcript

    @staticmethod
    def extract(data: bytes, uri: str) -> Transcript:
        """Decodes a result document and returns its first transcript."""
        try:
            document = TranscribeOutput.model_validate_json(data)
        except ValidationError as e:
            logger.warning("Result document could not be decoded", extra={"result_uri": uri})
            raise MalformedResult(uri, e) from e

        if document.results is None or not document.results.transcripts:
            raise TranscriptNotFound(uri)

        text = document.results.transcripts[0].transcript
        if not text:
            raise TranscriptNotFound(uri)
        return Transcript(text=text)
