"""
Parser Endpoint Module.

Provides the route that accepts a PDF or Word upload, extracts its text,
saves it to the temp directory and answers with a short preview.
Delegates parsing logic to the parser module (pdfminer + python-docx).
"""

from typing import Optional

from fastapi import APIRouter, File, UploadFile

from app.errors import DocumentValidationError
from app.models.document import ErrorResponse, ParseResponse, UploadedDocument
from app.services.document_service import (
    build_preview,
    process_document,
    validate_upload,
)


# Initialize router with tag
router = APIRouter(tags=['parser'])

@router.post(
    "/parse-document",
    summary="Upload a document and extract its text",
    response_description="Path to the extracted text and a short preview.",
    response_model=ParseResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def parse_uploaded_document(
    document: Optional[UploadFile] = File(None),
) -> ParseResponse:
    """
    Parse one uploaded document.

    - Accepts a single multipart field named `document`.
    - PDF, DOCX and DOC media types only, 10 MB at most.
    - The upload itself is deleted once the request is done; the extracted
      text stays in the temp directory.
    """
    if document is None or not document.filename:
        raise DocumentValidationError("No file uploaded")

    upload = UploadedDocument(
        filename=document.filename,
        content_type=document.content_type or "",
        content=await document.read(),
    )
    validate_upload(upload)

    result = await process_document(upload)

    return ParseResponse(
        success=True,
        message="Document parsed successfully",
        original_filename=result.original_filename,
        extracted_text_path=str(result.extracted_text_path),
        text_preview=build_preview(result.text),
    )
