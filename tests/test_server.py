import signal
import socket
import threading
import time

import httpx
import uvicorn

from transcript_pipeline.app import create_app
from transcript_pipeline.dependencies import get_upload_handler
from transcript_pipeline.domain import Job, JobStatus, StorageRef
from transcript_pipeline.domain.job_poller import JobStatusPoller
from transcript_pipeline.domain.job_submitter import JobSubmitter
from transcript_pipeline.domain.result_extractor import ResultExtractor
from transcript_pipeline.handlers import AudioUploadHandler
from transcript_pipeline.server import PipelineServer

from .fakes import FakeTranscriptionService


def _wait_until(predicate, timeout=5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return False


class TestPipelineServer:
    def test_exit_signal_cancels_registered_jobs(self, registry):
        token = registry.register(
            Job(
                name="J1",
                source_uri=StorageRef(bucket="audio-in", key="audio/J1.wav"),
                output_bucket="out",
                output_key_prefix="transcripts/",
            )
        )
        server = PipelineServer(uvicorn.Config(create_app(registry=registry), log_config=None), registry)

        server.handle_exit(signal.SIGTERM, None)

        assert token.is_set()
        assert server.should_exit

    def test_exit_signal_ends_upload_blocked_in_poll(self, storage, analyzer, registry, pipeline_config):
        transcription = FakeTranscriptionService(storage, statuses=[JobStatus.IN_PROGRESS])
        handler = AudioUploadHandler(
            storage=storage,
            submitter=JobSubmitter(transcription, "en-US"),
            poller=JobStatusPoller(transcription, poll_interval=3600),
            extractor=ResultExtractor(storage),
            analyzer=analyzer,
            registry=registry,
            config=pipeline_config,
        )
        app = create_app(registry=registry)
        app.dependency_overrides[get_upload_handler] = lambda: handler

        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
        server = PipelineServer(uvicorn.Config(app, log_config=None), registry)
        server_thread = threading.Thread(target=server.run, kwargs={"sockets": [sock]}, daemon=True)
        server_thread.start()
        assert _wait_until(lambda: server.started)

        responses = []

        def upload():
            responses.append(
                httpx.post(
                    f"http://127.0.0.1:{port}/upload",
                    files=[("files", ("a.wav", b"audio", "audio/wav"))],
                    timeout=10,
                )
            )

        upload_thread = threading.Thread(target=upload, daemon=True)
        upload_thread.start()
        assert _wait_until(lambda: registry.active_names())

        server.handle_exit(signal.SIGTERM, None)

        upload_thread.join(timeout=10)
        server_thread.join(timeout=10)
        assert not server_thread.is_alive()
        assert responses[0].status_code == 503
        assert responses[0].text.startswith("JOB_CANCELLED:")
        assert registry.active_names() == []
        assert len(transcription.started) == 1
