"""Polling of transcription jobs until they reach a terminal state."""

import threading
import time
from collections.abc import Callable

from transcript_pipeline.exceptions import (
    JobCancelled,
    JobFailed,
    JobNotFound,
    JobPollTimeout,
    MissingResultLocation,
)
from transcript_pipeline.infrastructure.interfaces.transcription_service import (
    TranscriptionService,
)
from transcript_pipeline.logging import setup_logging

from .models import Job, JobSnapshot, JobStatus, StorageRef
from .storage_uri import parse_storage_uri

logger = setup_logging()

DEFAULT_POLL_INTERVAL_SECONDS = 10.0


class JobStatusPoller:
    """
    Drives a Job from QUEUED/IN_PROGRESS to a terminal state.

    Each step queries the service once. Non-terminal states wait
    ``poll_interval`` seconds on the caller's cancellation token before the
    next query. There is no retry count; ``max_wait`` optionally bounds the
    total time spent waiting, and setting the token stops the loop at once.
    """

    def __init__(
        self,
        transcription_service: TranscriptionService,
        poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
        max_wait: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._service = transcription_service
        self._poll_interval = poll_interval
        self._max_wait = max_wait
        self._clock = clock

    def poll_once(self, job: Job) -> JobSnapshot:
        """Queries the job once and applies the observed status to it."""
        snapshot = self._service.get_job(job.name)
        if snapshot.status is not JobStatus.COMPLETED:
            job.transition(snapshot.status)
        return snapshot

    def wait_for_result(self, job: Job, cancel_token: threading.Event | None = None) -> StorageRef:
        """
        Polls until the job is terminal and returns its result location.

        Args:
            job: The job to track; its status is updated on every query.
            cancel_token: Event that aborts the wait when set.

        Returns:
            The StorageRef of the job's result document.

        Raises:
            JobFailed: The service reported the job as failed.
            JobNotFound: The service does not know the job.
            MissingResultLocation: The job completed without a result URI.
            JobCancelled: The cancellation token was set.
            JobPollTimeout: max_wait elapsed before a terminal state.
            InvalidUriFormat: The result URI could not be parsed.
            RemoteError: A status query failed.
        """
        token = cancel_token or threading.Event()
        started = self._clock()
        waits = 0

        while True:
            snapshot = self.poll_once(job)
            logger.info(
                "Job status observed",
                extra={"job_name": job.name, "status": snapshot.status.value, "waits": waits},
            )

            if snapshot.status is JobStatus.COMPLETED:
                return self._resolve_result(job, snapshot)
            if snapshot.status is JobStatus.FAILED:
                raise JobFailed(job.name, snapshot.failure_reason)
            if snapshot.status is JobStatus.NOT_FOUND:
                raise JobNotFound(job.name)

            waited = self._clock() - started
            if self._max_wait is not None and waited + self._poll_interval > self._max_wait:
                logger.warning(
                    "Job poll deadline reached",
                    extra={"job_name": job.name, "waited_seconds": waited},
                )
                raise JobPollTimeout(job.name, waited)

            if token.wait(self._poll_interval):
                logger.info("Job polling cancelled", extra={"job_name": job.name})
                raise JobCancelled(job.name)
            waits += 1

    def _resolve_result(self, job: Job, snapshot: JobSnapshot) -> StorageRef:
        if not snapshot.transcript_uri:
            logger.warning("Completed job has no result location", extra={"job_name": job.name})
            raise MissingResultLocation(job.name)

        result_ref = parse_storage_uri(snapshot.transcript_uri)
        job.complete(result_ref)
        logger.info(
            "Job completed",
            extra={"job_name": job.name, "result_uri": snapshot.transcript_uri},
        )
        return result_ref
