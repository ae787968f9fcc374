"""Medical text analysis endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from transcript_pipeline.dependencies import get_analyzer
from transcript_pipeline.domain.transcript_analyzer import TranscriptAnalyzer
from transcript_pipeline.logging import setup_logging

logger = setup_logging()

router = APIRouter(tags=["analysis"])

AnalyzerDep = Annotated[TranscriptAnalyzer, Depends(get_analyzer)]

NO_ENTITIES_MESSAGE = "No entities found."


@router.post("/analyze_medical_text", response_class=PlainTextResponse)
async def analyze_medical_text(request: Request, analyzer: AnalyzerDep) -> PlainTextResponse:
    """Detects medical entities in the raw request body, one entity per line."""
    body = await request.body()
    text = body.decode("utf-8", errors="replace")
    logger.info("Received medical text", extra={"characters": len(text)})

    entities = await run_in_threadpool(analyzer.detect_medical_entities, text)

    if not entities:
        return PlainTextResponse(NO_ENTITIES_MESSAGE)
    return PlainTextResponse("\n".join(entity.describe() for entity in entities))
