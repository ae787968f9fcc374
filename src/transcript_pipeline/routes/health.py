"""Service health endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from transcript_pipeline.dependencies import get_registry
from transcript_pipeline.domain.job_registry import JobRegistry
from transcript_pipeline.response_models import HealthResponse

router = APIRouter(tags=["health"])

RegistryDep = Annotated[JobRegistry, Depends(get_registry)]


@router.get("/health", response_model=HealthResponse)
def health(registry: RegistryDep) -> HealthResponse:
    """Reports liveness and the number of jobs being polled."""
    return HealthResponse(status="ok", active_jobs=len(registry.active_names()))
