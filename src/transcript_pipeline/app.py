"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from transcript_pipeline.domain.job_registry import JobRegistry
from transcript_pipeline.error_handlers import register_error_handlers
from transcript_pipeline.logging import setup_logging
from transcript_pipeline.routes import health_router, medical_router, upload_router

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Transcript pipeline starting")
    yield
    cancelled = app.state.registry.cancel_all()
    logger.info("Transcript pipeline stopped", extra={"cancelled_jobs": cancelled})


def create_app(registry: JobRegistry | None = None) -> FastAPI:
    """
    Builds the application with routes, CORS and error handlers.

    The registry is stored on app.state; request handlers and the shutdown
    path both read it from there.
    """
    app = FastAPI(title="Transcript Pipeline", lifespan=lifespan)
    app.state.registry = registry if registry is not None else JobRegistry()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(upload_router)
    app.include_router(medical_router)
    app.include_router(health_router)
    return app
