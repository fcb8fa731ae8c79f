import logging

from fastapi import APIRouter, File, UploadFile
from fastapi.concurrency import run_in_threadpool

from aibot.core.errors import ApiError
from aibot.core.responses import success_response
from aibot.services.documents import DocumentExtractionError, document_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/documents/extract")
async def extract_document(file: UploadFile = File(...)):
    """Extract plain text from an uploaded PDF, DOCX, text file or image."""
    data = await file.read()
    if not data:
        raise ApiError("Uploaded file is empty", 400, {"filename": file.filename})

    logger.info("Extracting text from %s (%s, %d bytes)", file.filename, file.content_type, len(data))
    try:
        # OCR and PDF parsing block, keep them off the event loop
        text = await run_in_threadpool(
            document_service.extract_text_from_buffer, data, file.content_type, file.filename or ""
        )
    except DocumentExtractionError as e:
        raise ApiError(str(e), 422, {"filename": file.filename, "mimeType": file.content_type})

    return success_response(
        {
            "originalName": file.filename,
            "mimeType": file.content_type,
            "fileSize": len(data),
            "extractedText": text,
        },
        "Document processed successfully",
    )
