"""
Comparison session state.

Owns the current batch of records, the active sort, the filter text, the
busy flag and the library status. State is only ever replaced, never
mutated in place, and all access happens on the event loop.
"""

import logging
from functools import lru_cache

# Handle both package imports and standalone imports
try:
    from ..models import ComparisonView, ExtractedRecord, SortConfig
except ImportError:
    from models import ComparisonView, ExtractedRecord, SortConfig

from .batch_service import BatchProcessingError, process_batch
from .libraries import LibraryLoadError, load_libraries
from .pdf_service import PDFService
from .table_service import build_view, toggle_sort

logger = logging.getLogger(__name__)


class BatchInProgressError(Exception):
    """Raised when an upload starts while another batch is processing."""

    pass


class LibrariesNotLoadedError(Exception):
    """Raised when an upload starts before the libraries have loaded."""

    pass


@lru_cache(maxsize=32)
def cached_view(
    records: tuple[ExtractedRecord, ...],
    sort_config: SortConfig,
    filter_text: str,
) -> tuple[ExtractedRecord, ...]:
    """Memoized table view; every argument is immutable and hashable."""
    return tuple(build_view(records, sort_config, filter_text))


class ComparisonSession:
    """In-memory state behind the comparison table."""

    def __init__(self):
        self.records: tuple[ExtractedRecord, ...] = ()
        self.sort_config = SortConfig()
        self.filter_text = ""
        self.busy = False
        self.libraries_loaded = False
        self.error: str | None = None

    async def load_libraries(self) -> None:
        """
        Load the PDF libraries once; failures are kept as a persistent error.
        """
        if self.libraries_loaded:
            return
        try:
            await load_libraries()
        except LibraryLoadError as e:
            self.error = str(e)
            return
        self.libraries_loaded = True

    async def upload(
        self,
        file_data: list[tuple[str, bytes]],
        pdf_service: PDFService | None = None,
    ) -> tuple[ExtractedRecord, ...]:
        """
        Replace the current batch with the records extracted from ``file_data``.

        The previous batch is cleared as soon as processing starts. If any
        file fails, the session ends up with no records and a single error.

        Raises:
            LibrariesNotLoadedError: If the PDF libraries are unavailable.
            BatchInProgressError: If another batch is still processing.
            BatchProcessingError: If any file in the batch fails.
        """
        if not self.libraries_loaded:
            raise LibrariesNotLoadedError(self.error or "Required libraries are still loading")
        if self.busy:
            raise BatchInProgressError("A batch is already being processed")

        self.busy = True
        self.error = None
        self.records = ()
        try:
            records = await process_batch(file_data, pdf_service)
        except BatchProcessingError as e:
            self.error = str(e)
            raise
        finally:
            self.busy = False

        self.records = tuple(records)
        return self.records

    def request_sort(self, key: str) -> SortConfig:
        self.sort_config = toggle_sort(self.sort_config, key)
        return self.sort_config

    def set_filter(self, text: str) -> None:
        self.filter_text = text

    def visible_records(self) -> tuple[ExtractedRecord, ...]:
        return cached_view(self.records, self.sort_config, self.filter_text)

    def view(self) -> ComparisonView:
        """Snapshot of the current table for the API."""
        visible = self.visible_records()
        return ComparisonView(
            records=list(visible),
            sort=self.sort_config,
            filter_text=self.filter_text,
            total_records=len(self.records),
            visible_records=len(visible),
            error=self.error,
        )


# Singleton instance for convenience
_session: ComparisonSession | None = None


def get_session() -> ComparisonSession:
    """Get or create the comparison session singleton."""
    global _session
    if _session is None:
        _session = ComparisonSession()
    return _session
