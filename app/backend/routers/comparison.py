"""
Router for the comparison table endpoints.

Handles:
- Reading the current sorted/filtered table
- Listing the table columns
- Toggling the sort column and direction
- Setting the free-text filter
- Exporting the visible table as a PDF report
"""

import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

# Handle both package imports and standalone imports
try:
    from ..config import get_settings
    from ..models import (
        COLUMNS,
        ColumnListResponse,
        ComparisonView,
        FilterRequest,
        NoticeResponse,
    )
    from ..services.report_service import NoDataToExportError, get_report_service
    from ..services.session import ComparisonSession, get_session
except ImportError:
    from config import get_settings
    from models import (
        COLUMNS,
        ColumnListResponse,
        ComparisonView,
        FilterRequest,
        NoticeResponse,
    )
    from services.report_service import NoDataToExportError, get_report_service
    from services.session import ComparisonSession, get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/comparison", tags=["comparison"])


@router.get("", response_model=ComparisonView)
async def get_comparison(
    session: ComparisonSession = Depends(get_session),
) -> ComparisonView:
    """Get the current comparison table."""
    return session.view()


@router.get("/columns", response_model=ColumnListResponse)
async def list_columns() -> ColumnListResponse:
    """List the table columns in display order."""
    return ColumnListResponse(columns=COLUMNS)


@router.post("/sort/{key}", response_model=ComparisonView)
async def request_sort(
    key: str,
    session: ComparisonSession = Depends(get_session),
) -> ComparisonView:
    """
    Select a sort column.

    Selecting the active column flips the direction; any other column
    sorts ascending.

    Args:
        key: Field name of the column (e.g. ``faceAmount``).
        session: Comparison session.

    Returns:
        The re-sorted table.

    Raises:
        InvalidSortKeyError: Unknown column, answered with 400 by the app's
            exception handler.
    """
    sort_config = session.request_sort(key)

    logger.info("Sorting by %s (%s)", sort_config.key, sort_config.direction.value)
    return session.view()


@router.put("/filter", response_model=ComparisonView)
async def set_filter(
    request: FilterRequest,
    session: ComparisonSession = Depends(get_session),
) -> ComparisonView:
    """Set the case-insensitive filter applied across every field."""
    session.set_filter(request.text)
    return session.view()


@router.get(
    "/export",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF report of the visible table, or a notice when it is empty",
        }
    },
)
async def export_report(
    session: ComparisonSession = Depends(get_session),
):
    """
    Export the visible (sorted and filtered) table as a PDF report.

    Exporting an empty table does not produce a file; a notice is returned
    instead.
    """
    settings = get_settings()
    try:
        pdf_bytes = get_report_service().build_report(session.visible_records())
    except NoDataToExportError as e:
        logger.info("Export skipped: %s", e)
        return JSONResponse(content=NoticeResponse(message=str(e)).model_dump())

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{settings.report_filename}"'},
    )
