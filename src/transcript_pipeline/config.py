"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel

DEFAULT_REGION = "us-west-2"


class AWSConfig(BaseModel, frozen=True):
    """AWS region override; None defers to the standard AWS resolution chain."""

    region: str | None = None


class StorageConfig(BaseModel, frozen=True):
    """S3-compatible object storage connection configuration."""

    endpoint: str = "s3.amazonaws.com"
    secure: bool = True


class PipelineConfig(BaseModel, frozen=True):
    """Settings for the upload, transcription and analysis stages."""

    input_bucket: str = "audio-uploads"
    output_bucket: str | None = None
    audio_key_prefix: str = "audio/"
    output_key_prefix: str = "transcripts/"
    transcription_language: str = "en-US"
    analysis_language: str = "en"
    poll_interval_seconds: float = 10.0
    max_wait_seconds: float | None = None
    max_analysis_bytes: int = 5000
    staging_dir: str | None = None


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    aws: AWSConfig
    storage: StorageConfig
    pipeline: PipelineConfig


def _optional_float(value: str | None) -> float | None:
    if value is None or value.strip() == "":
        return None
    return float(value)


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        aws=AWSConfig(region=os.getenv("AWS_REGION") or None),
        storage=StorageConfig(
            endpoint=os.getenv("S3_ENDPOINT", "s3.amazonaws.com"),
            secure=os.getenv("S3_SECURE", "true").lower() == "true",
        ),
        pipeline=PipelineConfig(
            input_bucket=os.getenv("PIPELINE_INPUT_BUCKET", "audio-uploads"),
            output_bucket=os.getenv("PIPELINE_OUTPUT_BUCKET") or None,
            audio_key_prefix=os.getenv("PIPELINE_AUDIO_PREFIX", "audio/"),
            output_key_prefix=os.getenv("PIPELINE_OUTPUT_PREFIX", "transcripts/"),
            transcription_language=os.getenv("PIPELINE_TRANSCRIPTION_LANGUAGE", "en-US"),
            analysis_language=os.getenv("PIPELINE_ANALYSIS_LANGUAGE", "en"),
            poll_interval_seconds=float(os.getenv("PIPELINE_POLL_INTERVAL_SECONDS", "10")),
            max_wait_seconds=_optional_float(os.getenv("PIPELINE_MAX_WAIT_SECONDS")),
            max_analysis_bytes=int(os.getenv("PIPELINE_MAX_ANALYSIS_BYTES", "5000")),
            staging_dir=os.getenv("PIPELINE_STAGING_DIR") or None,
        ),
    )
