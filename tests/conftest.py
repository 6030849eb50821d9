"""Pytest configuration and fixtures."""

import io
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from app.backend.main import app
from app.backend.models import ExtractedRecord
from app.backend.services import session as session_module


def build_pdf(pages: list[list[str]]) -> bytes:
    """Render each page's lines as plain text into a PDF document."""
    from reportlab.lib.pagesizes import letter
    from reportlab.pdfgen import canvas

    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            pdf.drawString(72, y, line)
            y -= 18
        pdf.showPage()
    pdf.save()
    return buffer.getvalue()


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    """Factory building a PDF from lines of text (one list per page)."""

    def _make(*pages: list[str]) -> bytes:
        return build_pdf(list(pages))

    return _make


@pytest.fixture
def client(monkeypatch) -> Generator[TestClient, None, None]:
    """Create a test client with a fresh comparison session."""
    monkeypatch.setattr(session_module, "_session", None)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_pdf_bytes(make_pdf) -> bytes:
    """A quoted-table style illustration."""
    return make_pdf(
        [
            '"Product Code","WL10"',
            '"Currency","USD"',
            '"Face Amount","","$250,000"',
            '"10 Pay","","12,345"',
            '"Year 10","50,000","61,234"',
            '"Guaranteed Interest Rate","3.00%"',
            '"Surrender Penalty Period","10 years"',
            '"(S&P) Financial Strength Rating","AA-"',
        ]
    )


@pytest.fixture
def invalid_file_bytes() -> bytes:
    """Create invalid (non-PDF) file bytes for testing."""
    return b"This is not a PDF file"


@pytest.fixture
def sample_records() -> list[ExtractedRecord]:
    """Records in extraction order with mixed numeric and missing values."""
    return [
        ExtractedRecord(
            file_name="beta.pdf",
            product_code="UL20",
            currency="USD",
            face_amount="500000",
            cash_value_year_10="N/A",
        ),
        ExtractedRecord(
            file_name="Alpha.pdf",
            product_code="WL10",
            currency="HKD",
            face_amount="250000",
            cash_value_year_10="61234",
        ),
        ExtractedRecord(
            file_name="gamma.pdf",
            product_code="wl05",
            currency="usd",
            face_amount="N/A",
            cash_value_year_10="1500.50",
        ),
        ExtractedRecord(
            file_name="delta.pdf",
            product_code="UL20",
            currency="SGD",
            face_amount="250000",
        ),
    ]
