"""
Document Parser Module.

Turns a stored PDF or Word file into flat plain text. PDF files go through
pdfminer, Word files through python-docx. Structural elements (images,
headers, layout) are not interpreted; only the text is kept.
"""

import logging
from pathlib import Path
from typing import Callable, Dict

from docx import Document
from docx.table import Table
from pdfminer.high_level import extract_text as pdfminer_extract_text

from app.errors import ExtractionError, UnsupportedFormatError
from app.models.document import DocumentFormat

logger = logging.getLogger(__name__)


def parse_pdf(file_path: Path) -> str:
    """Extract the text of every page of a PDF file."""
    return pdfminer_extract_text(str(file_path))


def parse_word(file_path: Path) -> str:
    """
    Extract paragraph and table cell text from a Word file in body order.

    Legacy binary ``.doc`` files share this routine; python-docx only reads
    the XML format, so those fail here as an extraction error.
    """
    document = Document(str(file_path))
    parts = []
    for block in document.iter_inner_content():
        if isinstance(block, Table):
            for row in block.rows:
                for cell in row.cells:
                    if cell.text:
                        parts.append(cell.text)
        elif block.text:
            parts.append(block.text)
    return "\n".join(parts)


EXTRACTORS: Dict[DocumentFormat, Callable[[Path], str]] = {
    DocumentFormat.PDF: parse_pdf,
    DocumentFormat.WORD_MODERN: parse_word,
    DocumentFormat.WORD_LEGACY: parse_word,
}


def parse_document(file_path: Path, document_format: DocumentFormat) -> str:
    """
    Run the extractor registered for ``document_format`` on ``file_path``.

    Raises:
        UnsupportedFormatError: no extractor for the format.
        ExtractionError: the extractor failed on the file content.
    """
    extractor = EXTRACTORS.get(document_format)
    if extractor is None:
        raise UnsupportedFormatError("Unsupported file format")

    try:
        return extractor(file_path)
    except Exception as e:
        logger.error("Error parsing %s file %s: %s", document_format.value, file_path, e)
        raise ExtractionError(str(e) or f"Could not extract text from {file_path.name}") from e
