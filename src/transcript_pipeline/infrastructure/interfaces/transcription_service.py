"""Abstract interface for asynchronous transcription jobs."""

from abc import ABC, abstractmethod

from transcript_pipeline.domain.models import JobSnapshot


class TranscriptionService(ABC):
    """Abstract base class for batch transcription backends."""

    @abstractmethod
    def start_job(
        self,
        job_name: str,
        media_uri: str,
        output_bucket: str,
        output_key: str,
        language_code: str,
    ) -> None:
        """
        Starts a transcription job for a stored media file.

        Args:
            job_name: Name unique among the service's active jobs.
            media_uri: Scheme-form URI of the audio object.
            output_bucket: Bucket the service writes the result into.
            output_key: Key prefix for the result object.
            language_code: Language of the audio.

        Raises:
            RemoteError: If the service rejects the request.
        """

    @abstractmethod
    def get_job(self, job_name: str) -> JobSnapshot:
        """
        Reads the current state of a job without modifying it.

        Returns:
            A JobSnapshot; NOT_FOUND when the service has no such job.

        Raises:
            RemoteError: If the status query itself fails.
        """
