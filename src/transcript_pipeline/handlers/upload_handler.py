"""Handler that runs uploaded audio through the transcription pipeline."""

import os
import tempfile

from transcript_pipeline.config import PipelineConfig
from transcript_pipeline.domain import AudioUpload, StorageRef
from transcript_pipeline.domain.job_poller import JobStatusPoller
from transcript_pipeline.domain.job_registry import JobRegistry
from transcript_pipeline.domain.job_submitter import JobSubmitter, generate_job_name
from transcript_pipeline.domain.result_extractor import ResultExtractor
from transcript_pipeline.domain.transcript_analyzer import TranscriptAnalyzer
from transcript_pipeline.exceptions import LocalIoError
from transcript_pipeline.infrastructure.interfaces import StorageClient
from transcript_pipeline.logging import setup_logging

logger = setup_logging()

DEFAULT_EXTENSION = ".wav"


class AudioUploadHandler:
    """Orchestrates upload, transcription and analysis for each uploaded file."""

    def __init__(
        self,
        storage: StorageClient,
        submitter: JobSubmitter,
        poller: JobStatusPoller,
        extractor: ResultExtractor,
        analyzer: TranscriptAnalyzer,
        registry: JobRegistry,
        config: PipelineConfig,
    ):
        self._storage = storage
        self._submitter = submitter
        self._poller = poller
        self._extractor = extractor
        self._analyzer = analyzer
        self._registry = registry
        self._config = config

    def process(self, uploads: list[AudioUpload]) -> list[str]:
        """
        Runs every upload through the pipeline in the order received.

        Args:
            uploads: The audio files from one request.

        Returns:
            The job names, one per upload.

        Raises:
            PipelineError: The first failure; remaining uploads are skipped.
        """
        job_names: list[str] = []
        for index, upload in enumerate(uploads):
            try:
                job_names.append(self.process_one(upload))
            except Exception:
                logger.error(
                    "Upload batch aborted",
                    extra={
                        "index": index,
                        "completed": len(job_names),
                        "skipped": len(uploads) - index - 1,
                    },
                )
                raise
        return job_names

    def process_one(self, upload: AudioUpload) -> str:
        """
        Uploads, transcribes and analyzes one audio file.

        Stages run strictly in sequence: stage locally, upload, submit,
        poll, extract, analyze.

        Returns:
            The name of the transcription job.
        """
        job_name = generate_job_name()
        extension = os.path.splitext(upload.filename)[1].lower() or DEFAULT_EXTENSION
        source = StorageRef(
            bucket=self._config.input_bucket,
            key=f"{self._config.audio_key_prefix}{job_name}{extension}",
        )

        logger.info(
            "Processing upload",
            extra={"file_name": upload.filename, "job_name": job_name, "object_name": source.key},
        )

        self._stage_and_upload(upload, source, extension)

        job = self._submitter.submit(
            source,
            self._config.output_bucket or self._config.input_bucket,
            self._config.output_key_prefix,
            job_name,
        )
        cancel_token = self._registry.register(job)
        try:
            result_ref = self._poller.wait_for_result(job, cancel_token)
            transcript = self._extractor.fetch(result_ref)
            sentiment = self._analyzer.analyze(transcript)
        finally:
            self._registry.release(job.name)

        logger.info(
            "Upload processed",
            extra={
                "file_name": upload.filename,
                "job_name": job.name,
                "status": job.status.value,
                "sentiment": sentiment.sentiment,
            },
        )
        return job.name

    def _stage_and_upload(self, upload: AudioUpload, source: StorageRef, extension: str) -> None:
        """Writes the upload to a local temp file and streams it to storage."""
        staging_dir = self._config.staging_dir or tempfile.gettempdir()
        try:
            staged = tempfile.NamedTemporaryFile(suffix=extension, dir=staging_dir)
        except OSError as e:
            logger.exception("Could not create staging file", extra={"staging_dir": staging_dir})
            raise LocalIoError(staging_dir, e) from e

        with staged:
            try:
                staged.write(upload.content)
                staged.flush()
                staged.seek(0)
            except OSError as e:
                logger.exception("Could not write staging file", extra={"path": staged.name})
                raise LocalIoError(staged.name, e) from e

            self._storage.upload(
                bucket_name=source.bucket,
                object_name=source.key,
                data=staged,
                size=len(upload.content),
                content_type=upload.content_type,
            )
