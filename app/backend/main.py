"""
FastAPI application for the illustration comparison service.

Provides endpoints for:
- Uploading a batch of illustration PDFs for field extraction
- Reading, sorting and filtering the comparison table
- Exporting the visible table as a PDF report
"""

import logging

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Handle both package imports (when running as module) and standalone imports (uvicorn main:app)
try:
    from .config import get_settings
    from .models import HealthResponse
    from .routers import comparison, upload
    from .services.batch_service import BatchProcessingError
    from .services.session import get_session
    from .services.table_service import InvalidSortKeyError
except ImportError:
    import sys
    from pathlib import Path
    # Add parent directory to path for standalone imports
    backend_dir = Path(__file__).parent
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))
    from config import get_settings
    from models import HealthResponse
    from routers import comparison, upload
    from services.batch_service import BatchProcessingError
    from services.session import get_session
    from services.table_service import InvalidSortKeyError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting Illustration Comparison Service...")
    session = get_session()
    await session.load_libraries()
    if session.libraries_loaded:
        logger.info("Services initialized successfully")
    else:
        logger.error("Uploads disabled: %s", session.error)
    yield
    logger.info("Shutting down Illustration Comparison Service...")


# Create FastAPI application
app = FastAPI(
    title="Illustration Comparison API",
    description="Extract and compare key figures from financial illustration PDFs",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Health Endpoints
# =============================================================================


def _health(message: str) -> HealthResponse:
    session = get_session()
    return HealthResponse(
        status="healthy" if session.libraries_loaded else "degraded",
        message=message if session.libraries_loaded else "Required libraries are not loaded",
        version="1.0.0",
        libraries_loaded=session.libraries_loaded,
        error=None if session.libraries_loaded else session.error,
    )


@app.get("/", response_model=HealthResponse)
async def root() -> HealthResponse:
    """Root endpoint - health check."""
    return _health("Illustration Comparison API is running")


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return _health("Service is healthy")


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(upload.router)
app.include_router(comparison.router)


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(BatchProcessingError)
async def batch_processing_error_handler(request, exc: BatchProcessingError):
    """Handle batch processing errors."""
    from fastapi import status

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


@app.exception_handler(InvalidSortKeyError)
async def invalid_sort_key_error_handler(request, exc: InvalidSortKeyError):
    """Handle unknown sort keys."""
    from fastapi import status

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )
