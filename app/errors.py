"""
Error types raised while handling an uploaded document.

Each error carries the HTTP status the API answers with; the message is
returned to the caller verbatim as the ``error`` field.
"""

from fastapi import status


class DocumentError(Exception):
    """Base class for every failure of the parse pipeline."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DocumentValidationError(DocumentError):
    """Upload rejected before anything was written to disk."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnsupportedFormatError(DocumentError):
    """File extension has no extractor."""


class ExtractionError(DocumentError):
    """Extractor could not read the stored file."""


class StorageError(DocumentError):
    """Filesystem failure on a scratch directory."""
