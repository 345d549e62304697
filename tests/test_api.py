from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from src.api import main
from src.errors import FetchError
from src.models.data_models import (
    AnalysisOutcome,
    AnalysisResult,
    AnalysisStatus,
    SentimentLabel,
)


class _StubAnalyzer:
    def __init__(self, outcome=None, error=None):
        self.outcome = outcome
        self.error = error
        self.contests = []

    def analyze(self, contest):
        self.contests.append(contest)
        if self.error is not None:
            raise self.error
        return self.outcome


@pytest.fixture
def client():
    # No context manager: lifespan would build real clients
    return TestClient(main.app)


def test_analyze_success(client, monkeypatch):
    stub = _StubAnalyzer(
        AnalysisOutcome(
            status=AnalysisStatus.COMPLETED,
            contest="World Cup",
            subreddit="soccer",
            comment_count=10,
            result=AnalysisResult(
                sentiment=SentimentLabel.POSITIVE,
                topics=["goal, final, keeper, match, referee", "fans, stadium, crowd, singing, half"],
            ),
        )
    )
    monkeypatch.setattr(main, "analyzer", stub)

    response = client.post("/api/analyze", json={"contest": "World Cup"})

    assert response.status_code == 200
    assert response.json() == {
        "sentiment": "Positive",
        "topics": [
            "goal, final, keeper, match, referee",
            "fans, stadium, crowd, singing, half",
        ],
    }
    assert stub.contests == ["World Cup"]


def test_analyze_not_found(client, monkeypatch):
    stub = _StubAnalyzer(
        AnalysisOutcome(
            status=AnalysisStatus.NOT_FOUND,
            contest="Obscure Local Bakeoff 1998",
            subreddit="bakeoff",
        )
    )
    monkeypatch.setattr(main, "analyzer", stub)

    response = client.post("/api/analyze", json={"contest": "Obscure Local Bakeoff 1998"})

    assert response.status_code == 404
    assert response.json() == {"error": "No comments found for the inferred subreddit."}


def test_analyze_failure_surfaces_message(client, monkeypatch):
    error = FetchError("private", RuntimeError("received 403 HTTP response"))
    monkeypatch.setattr(main, "analyzer", _StubAnalyzer(error=error))

    response = client.post("/api/analyze", json={"contest": "Members Only Cup"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to fetch data from subreddit private: received 403 HTTP response"
    }


@pytest.mark.parametrize("body", [{}, {"contest": ""}, {"contest": "   "}])
def test_analyze_rejects_missing_contest(client, monkeypatch, body):
    stub = _StubAnalyzer()
    monkeypatch.setattr(main, "analyzer", stub)

    response = client.post("/api/analyze", json=body)

    assert response.status_code == 422
    assert "error" in response.json()
    assert stub.contests == []


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_analyze_unexpected_error_surfaces_raw_message(client, monkeypatch):
    monkeypatch.setattr(main, "analyzer", _StubAnalyzer(error=RuntimeError("boom")))

    response = client.post("/api/analyze", json={"contest": "World Cup"})

    assert response.status_code == 500
    assert response.json() == {"error": "boom"}


def test_analyze_counts_requests_under_route_path(client, monkeypatch):
    monkeypatch.setattr(main, "analyzer", _StubAnalyzer(error=RuntimeError("boom")))
    labels = {"method": "POST", "endpoint": "/api/analyze", "status": "error"}
    before = REGISTRY.get_sample_value("api_requests_total", labels) or 0.0

    client.post("/api/analyze", json={"contest": "World Cup"})

    assert REGISTRY.get_sample_value("api_requests_total", labels) == before + 1


def test_mount_static_serves_front_end(tmp_path):
    (tmp_path / "index.html").write_text("<form id='contest-form'></form>")
    app = FastAPI()

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    assert main.mount_static(app, str(tmp_path))

    client = TestClient(app)
    assert "contest-form" in client.get("/").text
    assert client.get("/health").json() == {"status": "healthy"}


def test_mount_static_skips_missing_directory(tmp_path):
    app = FastAPI()
    assert not main.mount_static(app, str(tmp_path / "public"))
    assert all(route.name != "static" for route in app.routes)
