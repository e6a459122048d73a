"""Tests for FastAPI application endpoints."""

import json
import logging

import pytest
from fastapi.testclient import TestClient

from filing_engine.main import app
from filing_engine.middleware.rate_limit import get_limiter


@pytest.fixture(autouse=True)
def reset_rate_limiter() -> None:
    """Reset the rate limiter before each test."""
    get_limiter().reset()


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client."""
    return TestClient(app)


# Version Endpoint Tests


def test_version_endpoint(client: TestClient) -> None:
    """Test version endpoint returns version and commit hash."""
    response = client.get("/version")
    assert response.status_code == 200

    data = response.json()
    assert data == {"version": "1.0.0", "commit_hash": "development"}


# Health Check Tests


def test_health_check(client: TestClient) -> None:
    """Health reports the loaded catalog and the fallback state."""
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
    assert data["services"]["catalog"].endswith("patterns")
    assert data["services"]["llm_fallback"] == "disabled"


def test_health_check_reports_enabled_fallback(client: TestClient, monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setenv("ENABLE_LLM_FALLBACK", "true")

    response = client.get("/health")

    assert response.json()["services"]["llm_fallback"] == "enabled"


def test_lifespan_runs_startup() -> None:
    """Entering the client context runs startup validation."""
    with TestClient(app) as client:
        assert client.get("/version").status_code == 200


# Middleware Tests


def test_request_id_is_generated(client: TestClient) -> None:
    response = client.get("/version")
    assert len(response.headers["X-Request-ID"]) == 36


def test_request_id_is_echoed(client: TestClient) -> None:
    response = client.get("/version", headers={"X-Request-ID": "trace-abc"})
    assert response.headers["X-Request-ID"] == "trace-abc"


def test_request_log_includes_classification(client: TestClient, caplog) -> None:
    """The request log line carries the classification outcome, not the body."""
    with caplog.at_level(logging.INFO, logger="filing_engine.middleware.logging"):
        client.post("/api/classify", json={"file_name": "Term_Sheet_v2.pdf", "summary": "secret numbers"})

    records = [json.loads(r.getMessage()) for r in caplog.records if r.name == "filing_engine.middleware.logging"]
    entry = next(r for r in records if r["path"] == "/api/classify")

    assert entry["status_code"] == 200
    assert entry["file_type"] == "Term Sheet"
    assert entry["classification_method"] == "filename"
    assert entry["confidence"] == 0.85
    assert "secret numbers" not in json.dumps(entry)


def test_cors_headers(client: TestClient) -> None:
    response = client.options(
        "/api/classify",
        headers={"Origin": "http://example.com", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert "access-control-allow-origin" in response.headers
