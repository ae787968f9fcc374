"""Uvicorn server that stops in-flight transcription polls on exit signals."""

from types import FrameType

import uvicorn

from transcript_pipeline.domain.job_registry import JobRegistry


class PipelineServer(uvicorn.Server):
    """
    Cancels every active poll as soon as an exit signal arrives.

    Uvicorn waits for open connections to close before it runs the lifespan
    shutdown, and an upload blocked in a poll holds its connection open. The
    cancelled requests answer with JOB_CANCELLED and release their
    connections so the shutdown can proceed.
    """

    def __init__(self, config: uvicorn.Config, registry: JobRegistry):
        super().__init__(config)
        self._registry = registry

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        self._registry.cancel_all()
        super().handle_exit(sig, frame)
