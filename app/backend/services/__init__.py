"""
Services package for the illustration comparison application.

Contains:
- extraction: Pattern-based field extraction from document text
- pdf_service: PDF text layer reading
- table_service: Sorting and filtering of extracted records
- report_service: PDF report rendering
- batch_service: Concurrent all-or-nothing batch processing
- session: Comparison table state
"""

from .pdf_service import PDFService
from .report_service import ReportService
from .session import ComparisonSession

__all__ = ["PDFService", "ReportService", "ComparisonSession"]
