"""
Document types shared by the parse pipeline.

`DocumentFormat` is chosen once per upload from its extension and passed
explicitly to the extractor; the pydantic models shape the JSON responses.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class DocumentFormat(str, Enum):
    """Closed set of formats the parser knows how to route."""

    PDF = "pdf"
    WORD_MODERN = "docx"
    WORD_LEGACY = "doc"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_filename(cls, filename: str) -> "DocumentFormat":
        """Pick the format from the file extension, ignoring case."""
        suffix = Path(filename or "").suffix.lower()
        return _EXTENSIONS.get(suffix, cls.UNSUPPORTED)


_EXTENSIONS = {
    ".pdf": DocumentFormat.PDF,
    ".docx": DocumentFormat.WORD_MODERN,
    ".doc": DocumentFormat.WORD_LEGACY,
}


@dataclass(frozen=True)
class UploadedDocument:
    filename: str
    content_type: str
    content: bytes


@dataclass(frozen=True)
class StoredFile:
    path: Path
    original_filename: str
    format: DocumentFormat


@dataclass(frozen=True)
class ParseResult:
    original_filename: str
    extracted_text_path: Path
    text: str


class ParseResponse(BaseModel):
    success: bool = True
    message: str = "Document parsed successfully"
    original_filename: str = Field(..., alias="originalFilename")
    extracted_text_path: str = Field(..., alias="extractedTextPath")
    text_preview: str = Field(..., alias="textPreview")

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    error: str


class StatusResponse(BaseModel):
    status: str
    message: str
