"""
PDF report generation using reportlab.

Renders the current comparison table as a landscape A4 document.
"""

import io
import logging
from collections.abc import Sequence
from xml.sax.saxutils import escape

# Handle both package imports and standalone imports
try:
    from ..config import get_settings
    from ..models import COLUMNS, FIELD_ATTRIBUTES, ExtractedRecord
except ImportError:
    from config import get_settings
    from models import COLUMNS, FIELD_ATTRIBUTES, ExtractedRecord

logger = logging.getLogger(__name__)

# RGB fills and sizes in millimetres
HEADER_FILL_RGB = (22, 160, 133)
ALTERNATE_ROW_FILL_RGB = (245, 245, 245)
FILE_NAME_COLUMN_WIDTH_MM = 40
CELL_PADDING_MM = 1.5
PAGE_MARGIN_MM = 14


class NoDataToExportError(Exception):
    """Raised when a report is requested for an empty table."""

    pass


class ReportService:
    """Service for rendering comparison tables to PDF."""

    def __init__(
        self,
        title: str = "Illustration Comparison Report",
        font_size: float = 7.0,
    ):
        """
        Initialize the report service.

        Args:
            title: Heading printed above the table.
            font_size: Font size of the table cells.
        """
        self.title = title
        self.font_size = font_size

    def table_rows(self, records: Sequence[ExtractedRecord]) -> list[list[str]]:
        """Header row followed by one row per record, in column order."""
        header = [column.label for column in COLUMNS]
        body = [
            [getattr(record, FIELD_ATTRIBUTES[column.key]) for column in COLUMNS]
            for record in records
        ]
        return [header, *body]

    def build_report(self, records: Sequence[ExtractedRecord]) -> bytes:
        """
        Render the records as a PDF table.

        Args:
            records: Rows of the report, already sorted and filtered.

        Returns:
            The PDF document as bytes.

        Raises:
            NoDataToExportError: If there are no records to render.
        """
        if not records:
            raise NoDataToExportError("No data to export!")

        # Import here so a missing reportlab surfaces as a library load error
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4, landscape
        from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
        from reportlab.lib.units import mm
        from reportlab.platypus import (
            Paragraph,
            SimpleDocTemplate,
            Spacer,
            Table,
            TableStyle,
        )

        header_fill = colors.Color(*(c / 255 for c in HEADER_FILL_RGB))
        alternate_fill = colors.Color(*(c / 255 for c in ALTERNATE_ROW_FILL_RGB))
        padding = CELL_PADDING_MM * mm

        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=landscape(A4),
            leftMargin=PAGE_MARGIN_MM * mm,
            rightMargin=PAGE_MARGIN_MM * mm,
            topMargin=PAGE_MARGIN_MM * mm,
            bottomMargin=PAGE_MARGIN_MM * mm,
            title=self.title,
        )

        # File name gets a fixed width, the rest share what is left
        file_name_width = FILE_NAME_COLUMN_WIDTH_MM * mm
        other_width = (doc.width - file_name_width) / (len(COLUMNS) - 1)

        # Cells are Paragraphs so long values wrap inside their column; markup needs escaping
        header_style = ParagraphStyle(
            "ReportHeader",
            fontName="Helvetica-Bold",
            fontSize=self.font_size,
            leading=self.font_size + 1,
            textColor=colors.white,
        )
        body_style = ParagraphStyle(
            "ReportBody",
            fontName="Helvetica",
            fontSize=self.font_size,
            leading=self.font_size + 1,
        )
        header, *body = self.table_rows(records)
        rows = [
            [Paragraph(escape(label), header_style) for label in header],
            *([Paragraph(escape(value), body_style) for value in row] for row in body),
        ]

        table = Table(
            rows,
            colWidths=[file_name_width] + [other_width] * (len(COLUMNS) - 1),
            repeatRows=1,
        )
        table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), self.font_size),
                    ("LEADING", (0, 0), (-1, -1), self.font_size + 1),
                    ("TOPPADDING", (0, 0), (-1, -1), padding),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), padding),
                    ("LEFTPADDING", (0, 0), (-1, -1), padding),
                    ("RIGHTPADDING", (0, 0), (-1, -1), padding),
                    ("BACKGROUND", (0, 0), (-1, 0), header_fill),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, alternate_fill]),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ]
            )
        )

        styles = getSampleStyleSheet()
        doc.build([Paragraph(self.title, styles["Heading2"]), Spacer(1, 2 * mm), table])

        logger.info("Rendered report with %d row(s)", len(records))
        return buffer.getvalue()


# Singleton instance for convenience
_report_service: ReportService | None = None


def get_report_service() -> ReportService:
    """Get or create the report service singleton."""
    global _report_service
    if _report_service is None:
        settings = get_settings()
        _report_service = ReportService(
            title=settings.report_title,
            font_size=settings.report_font_size,
        )
    return _report_service
