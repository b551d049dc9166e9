"""Tests for the render API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from server.main import app


@pytest.fixture
def client() -> TestClient:
    """HTTP client bound to the FastAPI app."""
    return TestClient(app)


class TestRenderEndpoint:
    """Tests for POST /api/render."""

    def test_renders_document(self, client: TestClient) -> None:
        response = client.post(
            "/api/render",
            json={"markdown": "# Report #\n\n| a | b |\n| :-- | --: |\n| 1 | 2 |"},
        )

        assert response.status_code == 200
        payload = response.json()
        assert payload["title"] == "Report"
        assert payload["fragment_count"] == 2
        assert payload["html"].startswith("<h1>Report</h1><table><thead>")
        assert payload["plain_text"] == "Report\na | b |\n1 | 2 |"

    @pytest.mark.parametrize("markdown", ["", "   \n  "])
    def test_rejects_blank_markdown(self, client: TestClient, markdown: str) -> None:
        response = client.post("/api/render", json={"markdown": markdown})

        assert response.status_code == 422

    def test_rejects_missing_field(self, client: TestClient) -> None:
        response = client.post("/api/render", json={})

        assert response.status_code == 422


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
