"""Dependency injection configuration for the transcript pipeline."""

from functools import lru_cache
from typing import Annotated

import boto3
from fastapi import Depends, Request
from minio import Minio
from minio.credentials import (
    AWSConfigProvider,
    ChainedProvider,
    EnvAWSProvider,
    IamAwsProvider,
)

from transcript_pipeline.config import DEFAULT_REGION, AppConfig, load_config
from transcript_pipeline.domain.job_poller import JobStatusPoller
from transcript_pipeline.domain.job_registry import JobRegistry
from transcript_pipeline.domain.job_submitter import JobSubmitter
from transcript_pipeline.domain.result_extractor import ResultExtractor
from transcript_pipeline.domain.transcript_analyzer import TranscriptAnalyzer
from transcript_pipeline.handlers import AudioUploadHandler
from transcript_pipeline.infrastructure import (
    AWSTranscribeService,
    ComprehendMedicalService,
    ComprehendSentimentService,
    MinioStorageClient,
)
from transcript_pipeline.infrastructure.clients import SharedClients
from transcript_pipeline.logging import setup_logging

logger = setup_logging()

_config = load_config()


def resolve_region(config: AppConfig) -> str:
    """Explicit override, then the standard AWS chain, then the fixed default."""
    return config.aws.region or boto3.session.Session().region_name or DEFAULT_REGION


@lru_cache(maxsize=1)
def get_shared_clients() -> SharedClients:
    """Builds the remote service clients once and returns the same set afterwards."""
    region = resolve_region(_config)

    minio_client = Minio(
        endpoint=_config.storage.endpoint,
        region=region,
        secure=_config.storage.secure,
        credentials=ChainedProvider(
            [EnvAWSProvider(), AWSConfigProvider(), IamAwsProvider()]
        ),
    )

    clients = SharedClients(
        storage=MinioStorageClient(minio_client),
        transcription=AWSTranscribeService(boto3.client("transcribe", region_name=region)),
        sentiment=ComprehendSentimentService(boto3.client("comprehend", region_name=region)),
        medical=ComprehendMedicalService(boto3.client("comprehendmedical", region_name=region)),
    )
    logger.info(
        "Service clients initialized",
        extra={"region": region, "storage_endpoint": _config.storage.endpoint},
    )
    return clients


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_registry(request: Request) -> JobRegistry:
    """Returns the job registry owned by the running application."""
    return request.app.state.registry


def get_analyzer() -> TranscriptAnalyzer:
    """Returns an analyzer bound to the shared analytics clients."""
    clients = get_shared_clients()
    return TranscriptAnalyzer(
        clients.sentiment,
        clients.medical,
        language_code=_config.pipeline.analysis_language,
        max_text_bytes=_config.pipeline.max_analysis_bytes,
    )


def get_upload_handler(
    registry: Annotated[JobRegistry, Depends(get_registry)],
) -> AudioUploadHandler:
    """Returns the configured upload handler."""
    clients = get_shared_clients()
    pipeline = _config.pipeline
    return AudioUploadHandler(
        storage=clients.storage,
        submitter=JobSubmitter(clients.transcription, pipeline.transcription_language),
        poller=JobStatusPoller(
            clients.transcription,
            poll_interval=pipeline.poll_interval_seconds,
            max_wait=pipeline.max_wait_seconds,
        ),
        extractor=ResultExtractor(clients.storage),
        analyzer=get_analyzer(),
        registry=registry,
        config=pipeline,
    )
