"""AWS Transcribe implementation of the TranscriptionService interface."""

from botocore.exceptions import BotoCoreError, ClientError

from transcript_pipeline.domain.models import JobSnapshot, JobStatus
from transcript_pipeline.exceptions import RemoteError
from transcript_pipeline.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()

_STATUS_MAP = {
    "QUEUED": JobStatus.QUEUED,
    "IN_PROGRESS": JobStatus.IN_PROGRESS,
    "COMPLETED": JobStatus.COMPLETED,
    "FAILED": JobStatus.FAILED,
}


def _is_missing_job(error: ClientError) -> bool:
    details = error.response.get("Error", {})
    code = details.get("Code", "")
    message = details.get("Message", "").lower()
    if code == "NotFoundException":
        return True
    return code == "BadRequestException" and "couldn't be found" in message


class AWSTranscribeService(TranscriptionService):
    """Runs batch transcription jobs through a boto3 Transcribe client."""

    def __init__(self, client):
        self._client = client

    def start_job(
        self,
        job_name: str,
        media_uri: str,
        output_bucket: str,
        output_key: str,
        language_code: str,
    ) -> None:
        try:
            self._client.start_transcription_job(
                TranscriptionJobName=job_name,
                LanguageCode=language_code,
                Media={"MediaFileUri": media_uri},
                OutputBucketName=output_bucket,
                OutputKey=output_key,
            )
        except (BotoCoreError, ClientError) as e:
            logger.exception(
                "Transcription job submission failed", extra={"job_name": job_name}
            )
            raise RemoteError("start_transcription_job", str(e), e) from e

        logger.info(
            "Transcription job submitted",
            extra={"job_name": job_name, "media_uri": media_uri},
        )

    def get_job(self, job_name: str) -> JobSnapshot:
        try:
            response = self._client.get_transcription_job(TranscriptionJobName=job_name)
        except ClientError as e:
            if _is_missing_job(e):
                return JobSnapshot(status=JobStatus.NOT_FOUND)
            logger.exception("Transcription status query failed", extra={"job_name": job_name})
            raise RemoteError("get_transcription_job", str(e), e) from e
        except BotoCoreError as e:
            logger.exception("Transcription status query failed", extra={"job_name": job_name})
            raise RemoteError("get_transcription_job", str(e), e) from e

        job = response.get("TranscriptionJob")
        if not job:
            return JobSnapshot(status=JobStatus.NOT_FOUND)

        # Anything unrecognised is still running as far as the poller is concerned.
        status = _STATUS_MAP.get(job.get("TranscriptionJobStatus"), JobStatus.IN_PROGRESS)
        return JobSnapshot(
            status=status,
            transcript_uri=(job.get("Transcript") or {}).get("TranscriptFileUri"),
            failure_reason=job.get("FailureReason"),
        )
