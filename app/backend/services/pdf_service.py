"""
PDF text service using pdfplumber (pdfminer.six).

Handles reading the text layer of PDF documents for field extraction.
"""

import io
import logging
from typing import BinaryIO

logger = logging.getLogger(__name__)


class PDFTextExtractionError(Exception):
    """Raised when the text of a PDF cannot be read."""

    pass


class PDFService:
    """
    Service for PDF text operations.

    Uses pdfplumber to read the text layer page by page. Scanned documents
    without a text layer yield empty pages rather than an error.
    """

    def __init__(self, page_separator: str = "\n", line_separator: str = " "):
        """
        Initialize the PDF service.

        Args:
            page_separator: Appended after the text of every page.
            line_separator: Joins the text lines within a page.
        """
        self.page_separator = page_separator
        self.line_separator = line_separator

    def extract_pages(self, file_bytes: bytes | BinaryIO) -> list[str]:
        """
        Read the text of every page.

        Args:
            file_bytes: PDF file as bytes or file-like object.

        Returns:
            One string per page, with the page's lines joined by the line separator.

        Raises:
            PDFTextExtractionError: If the document cannot be opened or read.
        """
        import pdfplumber

        # Ensure we have bytes
        if hasattr(file_bytes, "read"):
            pdf_bytes = file_bytes.read()
        else:
            pdf_bytes = file_bytes

        if not pdf_bytes:
            raise PDFTextExtractionError("Empty PDF file provided")

        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [
                    self.line_separator.join((page.extract_text() or "").splitlines())
                    for page in pdf.pages
                ]
        except Exception as e:
            logger.exception("Unexpected error while reading PDF text")
            raise PDFTextExtractionError(f"Could not read PDF text: {e}") from e

        logger.info("Read text from %d page(s)", len(pages))
        return pages

    def extract_text(self, file_bytes: bytes | BinaryIO) -> str:
        """
        Read the whole document as one string.

        Args:
            file_bytes: PDF file as bytes or file-like object.

        Returns:
            Every page's text followed by the page separator.

        Raises:
            PDFTextExtractionError: If the document cannot be opened or read.
        """
        return "".join(page + self.page_separator for page in self.extract_pages(file_bytes))


# Singleton instance for convenience
_pdf_service: PDFService | None = None


def get_pdf_service() -> PDFService:
    """Get or create the PDF service singleton."""
    global _pdf_service
    if _pdf_service is None:
        _pdf_service = PDFService()
    return _pdf_service
