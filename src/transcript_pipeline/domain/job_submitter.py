"""Submission of transcription jobs."""

import uuid

from transcript_pipeline.infrastructure.interfaces.transcription_service import (
    TranscriptionService,
)
from transcript_pipeline.logging import setup_logging

from .models import Job, StorageRef
from .storage_uri import format_storage_uri

logger = setup_logging()


def generate_job_name() -> str:
    """Returns a new alphanumeric job name."""
    return uuid.uuid4().hex


class JobSubmitter:
    """Starts transcription jobs for uploaded audio."""

    def __init__(self, transcription_service: TranscriptionService, language_code: str):
        self._service = transcription_service
        self._language_code = language_code

    def submit(
        self,
        source: StorageRef,
        output_bucket: str,
        output_key_prefix: str,
        job_name: str,
    ) -> Job:
        """
        Starts a job for the audio at ``source``.

        The service writes its result under ``output_bucket`` /
        ``output_key_prefix``. A name collision with another active job is
        reported by the service and surfaces unchanged.

        Returns:
            The new Job in the QUEUED state.

        Raises:
            RemoteError: If the service rejects the request.
        """
        self._service.start_job(
            job_name=job_name,
            media_uri=format_storage_uri(source),
            output_bucket=output_bucket,
            output_key=output_key_prefix,
            language_code=self._language_code,
        )

        logger.info(
            "Job submitted",
            extra={"job_name": job_name, "source_uri": format_storage_uri(source)},
        )

        return Job(
            name=job_name,
            source_uri=source,
            output_bucket=output_bucket,
            output_key_prefix=output_key_prefix,
        )
