"""Response models for the transcript pipeline API."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness information for the service."""

    status: str
    active_jobs: int
