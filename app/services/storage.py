"""
Scratch storage for uploaded documents and extracted text.

``uploads/`` holds each upload only for the lifetime of its request.
``temp/`` accumulates the extracted text files and is never cleaned here.
"""

import logging
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi.concurrency import run_in_threadpool

from app.errors import StorageError
from app.models.document import DocumentFormat, StoredFile, UploadedDocument
from config import settings

logger = logging.getLogger(__name__)

EXTRACTED_SUFFIX = "-extracted.txt"


def bootstrap_directories() -> None:
    """Create the upload and temp directories if they are missing."""
    for directory in (settings.UPLOAD_DIR, settings.TEMP_DIR):
        directory = Path(directory)
        if directory.is_dir():
            continue
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Could not create directory {directory}: {e}") from e
        logger.info("Created %s directory", directory)


def stored_filename(original_filename: str) -> str:
    """Timestamp-prefixed name used for the upload on disk, unique per call."""
    return f"{time.time_ns()}-{uuid.uuid4().hex[:8]}-{Path(original_filename).name}"


def extracted_text_path(original_filename: str) -> Path:
    """Artifact path: original name without extension plus ``-extracted.txt``."""
    stem = Path(Path(original_filename).name).stem
    return Path(settings.TEMP_DIR).resolve() / f"{stem}{EXTRACTED_SUFFIX}"


def _write_upload(path: Path, content: bytes) -> None:
    with open(path, "xb") as f:
        f.write(content)


def _remove_upload(path: Path) -> None:
    try:
        path.unlink()
    except OSError as e:
        logger.error("Error deleting file %s: %s", path, e)
    else:
        logger.info("Successfully deleted %s", path)


@asynccontextmanager
async def stored_upload(document: UploadedDocument) -> AsyncIterator[StoredFile]:
    """
    Write ``document`` to the upload directory for the duration of the block.

    The file is removed on exit whether the block succeeded or raised.
    Removal failures are logged and never propagate.
    """
    path = Path(settings.UPLOAD_DIR) / stored_filename(document.filename)
    try:
        await run_in_threadpool(_write_upload, path, document.content)
    except FileExistsError as e:
        raise StorageError(f"Could not store upload {document.filename}: {e}") from e
    except OSError as e:
        if path.exists():
            await run_in_threadpool(_remove_upload, path)
        raise StorageError(f"Could not store upload {document.filename}: {e}") from e

    logger.info("Stored upload %s as %s", document.filename, path.name)
    try:
        yield StoredFile(
            path=path,
            original_filename=document.filename,
            format=DocumentFormat.from_filename(document.filename),
        )
    finally:
        await run_in_threadpool(_remove_upload, path)


def _write_text(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")


async def write_extracted_text(text: str, original_filename: str) -> Path:
    """Persist ``text`` under the temp directory and return its path."""
    path = extracted_text_path(original_filename)
    try:
        await run_in_threadpool(_write_text, path, text)
    except OSError as e:
        raise StorageError(f"Could not write extracted text to {path}: {e}") from e
    logger.info("Wrote extracted text to %s", path)
    return path
