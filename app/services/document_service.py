"""
Parse pipeline for a single uploaded document.

store -> dispatch -> extract -> persist -> cleanup, one linear coroutine.
Every stage raises a ``DocumentError`` subclass on failure; the stored upload
is released by ``stored_upload`` no matter where the pipeline stops.
"""

import logging

from fastapi.concurrency import run_in_threadpool

from app.errors import DocumentError, DocumentValidationError
from app.models.document import ParseResult, UploadedDocument
from app.models.parser import parse_document
from app.services.storage import stored_upload, write_extracted_text
from config import settings

logger = logging.getLogger(__name__)


def validate_upload(document: UploadedDocument) -> None:
    """Reject uploads with a disallowed media type or an oversized body."""
    if document.content_type not in settings.ALLOWED_MIME_TYPES:
        raise DocumentValidationError(
            "Unsupported file format. Only PDF and DOCX files are allowed."
        )
    if len(document.content) > settings.MAX_FILE_SIZE:
        raise DocumentValidationError("File too large")


def build_preview(text: str) -> str:
    return text[: settings.PREVIEW_LENGTH] + "..."


async def process_document(document: UploadedDocument) -> ParseResult:
    """Extract the text of an already validated upload and persist it."""
    try:
        async with stored_upload(document) as stored:
            text = await run_in_threadpool(parse_document, stored.path, stored.format)
            logger.info(
                "Extracted %d characters from %s", len(text), stored.original_filename
            )
            artifact = await write_extracted_text(text, stored.original_filename)
    except DocumentError:
        logger.exception("Error processing document %s", document.filename)
        raise

    return ParseResult(
        original_filename=document.filename,
        extracted_text_path=artifact,
        text=text,
    )
