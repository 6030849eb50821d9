"""Tests for FastAPI endpoints."""

import pytest
from fastapi.testclient import TestClient

from app.backend.services.session import get_session


def upload(client: TestClient, *files: tuple[str, bytes]):
    return client.post(
        "/upload",
        files=[("files", (name, content, "application/pdf")) for name, content in files],
    )


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_root_endpoint(self, client: TestClient):
        """Test root endpoint returns health status."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    def test_health_endpoint(self, client: TestClient):
        """Test /health endpoint reports loaded libraries."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["libraries_loaded"] is True
        assert data["error"] is None


class TestUploadEndpoint:
    """Tests for POST /upload endpoint."""

    def test_upload_extracts_fields(self, client: TestClient, sample_pdf_bytes: bytes):
        """Test that an uploaded illustration produces a full record."""
        response = upload(client, ("illustration.pdf", sample_pdf_bytes))
        assert response.status_code == 200
        data = response.json()
        assert data["totalRecords"] == 1
        record = data["records"][0]
        assert record["fileName"] == "illustration.pdf"
        assert record["productCode"] == "WL10"
        assert record["currency"] == "USD"
        assert record["faceAmount"] == "250000"
        assert record["annualPremium"] == "12345"
        assert record["cashValueYear10"] == "61234"
        assert record["cashValueYear20"] == "N/A"
        assert record["guaranteedInterestRate"] == "3.00%"
        assert record["surrenderPenaltyPeriod"] == "10 years"
        assert record["spRating"] == "AA-"
        assert len(record) == 12

    def test_upload_requires_files(self, client: TestClient):
        """Test that at least one file is required."""
        response = client.post("/upload")
        assert response.status_code == 422  # FastAPI validation error

    def test_invalid_file_fails_whole_batch(
        self, client: TestClient, sample_pdf_bytes: bytes, invalid_file_bytes: bytes
    ):
        """Test that one unreadable file discards the whole batch."""
        response = upload(
            client,
            ("a.pdf", sample_pdf_bytes),
            ("b.pdf", invalid_file_bytes),
            ("c.pdf", sample_pdf_bytes),
        )
        assert response.status_code == 422
        assert "error occurred while processing the PDFs" in response.json()["detail"]

        view = client.get("/comparison").json()
        assert view["records"] == []
        assert view["error"] == response.json()["detail"]

    def test_upload_rejected_before_libraries_load(
        self, client: TestClient, sample_pdf_bytes: bytes
    ):
        """Test that uploads are disabled until the libraries are loaded."""
        get_session().libraries_loaded = False
        response = upload(client, ("a.pdf", sample_pdf_bytes))
        assert response.status_code == 503

    def test_upload_rejected_while_busy(self, client: TestClient, sample_pdf_bytes: bytes):
        """Test that a second batch is refused while one is in flight."""
        get_session().busy = True
        response = upload(client, ("a.pdf", sample_pdf_bytes))
        assert response.status_code == 409


class TestComparisonEndpoints:
    """Tests for /comparison endpoints."""

    @pytest.fixture
    def loaded_client(self, client: TestClient, make_pdf) -> TestClient:
        upload(
            client,
            ("b.pdf", make_pdf(['"Currency","USD"', '"Face Amount","","100,000"'])),
            ("a.pdf", make_pdf(['"Currency","HKD"', '"Face Amount","","900,000"'])),
            ("c.pdf", make_pdf(['"Currency","usd"'])),
        )
        return client

    def test_empty_comparison(self, client: TestClient):
        """Test the table before any upload."""
        data = client.get("/comparison").json()
        assert data["records"] == []
        assert data["sort"] == {"key": "fileName", "direction": "ascending"}
        assert data["filterText"] == ""

    def test_list_columns(self, client: TestClient):
        """Test the twelve columns are listed in order."""
        columns = client.get("/comparison/columns").json()["columns"]
        assert len(columns) == 12
        assert columns[0] == {"key": "fileName", "label": "File Name"}
        assert columns[-1] == {"key": "spRating", "label": "S&P Rating"}

    def test_default_sort_by_file_name(self, loaded_client: TestClient):
        """Test records are listed by file name ascending."""
        data = loaded_client.get("/comparison").json()
        assert [r["fileName"] for r in data["records"]] == ["a.pdf", "b.pdf", "c.pdf"]

    def test_sort_toggle(self, loaded_client: TestClient):
        """Test numeric sort and direction toggling."""
        data = loaded_client.post("/comparison/sort/faceAmount").json()
        assert data["sort"] == {"key": "faceAmount", "direction": "ascending"}
        # c.pdf has no face amount and sorts as zero
        assert [r["fileName"] for r in data["records"]] == ["c.pdf", "b.pdf", "a.pdf"]

        data = loaded_client.post("/comparison/sort/faceAmount").json()
        assert data["sort"]["direction"] == "descending"
        assert [r["fileName"] for r in data["records"]] == ["a.pdf", "b.pdf", "c.pdf"]

    def test_sort_unknown_key(self, loaded_client: TestClient):
        """Test that an unknown sort key is rejected."""
        response = loaded_client.post("/comparison/sort/premium")
        assert response.status_code == 400
        assert "Unknown sort key" in response.json()["detail"]

    def test_filter(self, loaded_client: TestClient):
        """Test case-insensitive filtering across fields."""
        data = loaded_client.put("/comparison/filter", json={"text": "USD"}).json()
        assert data["filterText"] == "USD"
        assert [r["fileName"] for r in data["records"]] == ["b.pdf", "c.pdf"]
        assert data["visibleRecords"] == 2
        assert data["totalRecords"] == 3

    def test_export_pdf(self, loaded_client: TestClient):
        """Test exporting the visible table as a PDF attachment."""
        response = loaded_client.get("/comparison/export")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert 'filename="illustration-comparison.pdf"' in response.headers["content-disposition"]
        assert response.content[:4] == b"%PDF"

    def test_export_with_no_visible_records(self, loaded_client: TestClient):
        """Test that exporting an empty view returns a notice, not a file."""
        loaded_client.put("/comparison/filter", json={"text": "no such value"})
        response = loaded_client.get("/comparison/export")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"message": "No data to export!"}


class TestCORS:
    """Tests for CORS configuration."""

    def test_cors_allows_localhost_3000(self, client: TestClient):
        """Test that localhost:3000 is allowed."""
        response = client.get(
            "/health",
            headers={"Origin": "http://localhost:3000"},
        )
        assert response.status_code == 200
        assert (
            response.headers.get("access-control-allow-origin")
            == "http://localhost:3000"
        )
