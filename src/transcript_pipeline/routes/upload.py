"""Audio upload endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from transcript_pipeline.dependencies import get_upload_handler
from transcript_pipeline.domain import AudioUpload
from transcript_pipeline.handlers import AudioUploadHandler
from transcript_pipeline.logging import setup_logging

logger = setup_logging()

router = APIRouter(tags=["transcription"])

HandlerDep = Annotated[AudioUploadHandler, Depends(get_upload_handler)]

DEFAULT_CONTENT_TYPE = "audio/wav"


@router.post("/upload", response_model=list[str])
def upload_audio(
    handler: HandlerDep,
    files: list[UploadFile] = File(...),
) -> list[str]:
    """
    Uploads audio files and transcribes them.

    Blocks until every file has been transcribed and analyzed, then returns
    the job names in upload order.
    """
    logger.info(
        "Received upload request",
        extra={"file_count": len(files), "file_names": [f.filename for f in files]},
    )

    uploads = [
        AudioUpload(
            filename=file.filename or f"upload_{index}",
            content=file.file.read(),
            content_type=file.content_type or DEFAULT_CONTENT_TYPE,
        )
        for index, file in enumerate(files)
    ]

    return handler.process(uploads)
