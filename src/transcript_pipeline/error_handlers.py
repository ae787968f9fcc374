"""FastAPI exception handlers for pipeline errors."""

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from transcript_pipeline.exceptions import PipelineError
from transcript_pipeline.logging import setup_logging

logger = setup_logging()


def register_error_handlers(app: FastAPI) -> None:
    """
    Registers exception handlers on a FastAPI application.

    Pipeline errors keep their kind in the plain-text body
    (``ERROR_CODE: message``) and use the error's own status code.
    """

    @app.exception_handler(PipelineError)
    async def handle_pipeline_error(request: Request, exc: PipelineError) -> PlainTextResponse:
        logger.error(
            "Pipeline error",
            extra={
                "error_code": exc.error_code,
                "error_message": str(exc),
                "path": request.url.path,
            },
        )
        return PlainTextResponse(f"{exc.error_code}: {exc}", status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> PlainTextResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return PlainTextResponse(f"INTERNAL_ERROR: {exc}", status_code=500)
