"""
Router for batch upload endpoints.

Handles:
- Uploading a batch of illustration PDFs and extracting their fields
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

# Handle both package imports and standalone imports
try:
    from ..models import ComparisonView
    from ..services.session import (
        BatchInProgressError,
        ComparisonSession,
        LibrariesNotLoadedError,
        get_session,
    )
except ImportError:
    from models import ComparisonView
    from services.session import (
        BatchInProgressError,
        ComparisonSession,
        LibrariesNotLoadedError,
        get_session,
    )

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["upload"])


@router.post("/upload", response_model=ComparisonView)
async def upload_batch(
    files: Annotated[list[UploadFile], File(description="Illustration PDFs to compare")],
    session: ComparisonSession = Depends(get_session),
) -> ComparisonView:
    """
    Upload a batch of PDFs and replace the comparison table with their fields.

    Files are not validated up front: anything that cannot be read as a PDF
    fails the whole batch with a single error message. That failure
    propagates as BatchProcessingError and is answered with 422 by the app's
    exception handler.
    """
    file_data: list[tuple[str, bytes]] = []
    try:
        for file in files:
            content = await file.read()
            file_data.append((file.filename or "", content))
    finally:
        for file in files:
            await file.close()

    logger.info("Received batch of %d file(s)", len(file_data))

    try:
        await session.upload(file_data)
    except LibrariesNotLoadedError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    except BatchInProgressError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )

    return session.view()
