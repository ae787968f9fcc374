"""In-memory tracking of jobs that are currently being processed."""

import threading

from transcript_pipeline.exceptions import DuplicateJobName
from transcript_pipeline.logging import setup_logging

from .models import Job

logger = setup_logging()


class JobRegistry:
    """
    Holds the active jobs of this process and their cancellation tokens.

    Each job is still owned by the pipeline run that registered it; the
    registry only hands out lookups and the ability to cancel. The lock
    guards the dictionaries and is never held while calling a service. It is
    reentrant because cancel_all() also runs from the exit signal handler on
    the main thread.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._jobs: dict[str, Job] = {}
        self._tokens: dict[str, threading.Event] = {}

    def register(self, job: Job) -> threading.Event:
        """Tracks a job and returns the cancellation token for its poll loop."""
        with self._lock:
            if job.name in self._jobs:
                raise DuplicateJobName(job.name)
            token = threading.Event()
            self._jobs[job.name] = job
            self._tokens[job.name] = token
        logger.info("Job registered", extra={"job_name": job.name})
        return token

    def release(self, name: str) -> None:
        """Stops tracking a job. Unknown names are ignored."""
        with self._lock:
            self._jobs.pop(name, None)
            self._tokens.pop(name, None)

    def get(self, name: str) -> Job | None:
        with self._lock:
            return self._jobs.get(name)

    def active_names(self) -> list[str]:
        with self._lock:
            return list(self._jobs)

    def cancel(self, name: str) -> bool:
        """Signals the job's poll loop to stop. Returns False for unknown jobs."""
        with self._lock:
            token = self._tokens.get(name)
        if token is None:
            return False
        token.set()
        logger.info("Job cancellation requested", extra={"job_name": name})
        return True

    def cancel_all(self) -> int:
        """Signals every active poll loop to stop and returns how many were signalled."""
        with self._lock:
            tokens = list(self._tokens.values())
        for token in tokens:
            token.set()
        if tokens:
            logger.info("Cancelled active jobs", extra={"count": len(tokens)})
        return len(tokens)
