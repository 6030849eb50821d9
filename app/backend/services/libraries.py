"""
One-time loading of the PDF reader and writer libraries.

Uploads stay disabled until every library here has been imported
successfully. A failure is permanent for the life of the process.
"""

import asyncio
import importlib
import logging

logger = logging.getLogger(__name__)

# PDF reader, PDF writer and its table layout module
REQUIRED_LIBRARIES: tuple[str, ...] = ("pdfplumber", "reportlab", "reportlab.platypus")

LIBRARY_LOAD_MESSAGE = (
    "Failed to load required libraries. Please check your installation and restart the service."
)


class LibraryLoadError(Exception):
    """Raised when a required library cannot be loaded."""

    pass


async def load_libraries(names: tuple[str, ...] = REQUIRED_LIBRARIES) -> None:
    """
    Import every required library concurrently.

    Args:
        names: Dotted module names to import.

    Raises:
        LibraryLoadError: If any of the modules fails to import.
    """
    try:
        await asyncio.gather(*(asyncio.to_thread(importlib.import_module, name) for name in names))
    except Exception as e:
        logger.error("Library loading failed: %s", e)
        raise LibraryLoadError(LIBRARY_LOAD_MESSAGE) from e

    logger.info("Loaded libraries: %s", ", ".join(names))
