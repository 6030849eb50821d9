"""
Concurrent processing of an upload batch.

Every file is read and extracted in its own task. The batch succeeds only
when every task succeeds; a single failure discards the whole batch.
"""

import asyncio
import logging

# Handle both package imports and standalone imports
try:
    from ..models import ExtractedRecord
except ImportError:
    from models import ExtractedRecord

from .extraction import extract_record
from .pdf_service import PDFService, get_pdf_service

logger = logging.getLogger(__name__)

BATCH_ERROR_MESSAGE = (
    "An error occurred while processing the PDFs. "
    "Please ensure they are valid and not corrupted."
)


class BatchProcessingError(Exception):
    """Raised when any document in a batch fails to process."""

    pass


async def process_document(
    filename: str,
    content: bytes,
    pdf_service: PDFService,
) -> ExtractedRecord:
    """Read one document's text off the event loop and extract its fields."""
    text = await asyncio.to_thread(pdf_service.extract_text, content)
    record = extract_record(filename, text)
    logger.info("Extracted fields from %s (%d characters of text)", filename, len(text))
    return record


async def process_batch(
    file_data: list[tuple[str, bytes]],
    pdf_service: PDFService | None = None,
) -> list[ExtractedRecord]:
    """
    Process every file of a batch concurrently.

    Args:
        file_data: List of (filename, content) tuples in upload order.
        pdf_service: Text service to use; defaults to the shared instance.

    Returns:
        One record per file, in upload order.

    Raises:
        BatchProcessingError: If any file fails. No partial results are returned.
    """
    pdf_service = pdf_service or get_pdf_service()

    logger.info("Starting batch processing: %d documents", len(file_data))

    try:
        records = await asyncio.gather(
            *(process_document(filename, content, pdf_service) for filename, content in file_data)
        )
    except Exception as e:
        logger.exception("Batch processing failed")
        raise BatchProcessingError(BATCH_ERROR_MESSAGE) from e

    logger.info("Batch completed: %d documents", len(records))
    return list(records)
