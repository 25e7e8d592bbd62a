"""
Integration tests for the FastAPI REST endpoints.

Uses the TestClient with the service bundle overridden — no real LLM calls.
Background tasks run to completion before the TestClient call returns.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import AsyncMock, patch
from fastapi.testclient import TestClient

from api.routes import get_services
from laws.catalog import FINTECH_LAW_ID
from main import app
from services.run_service import create_run, save_run


@pytest.fixture
def client(offline_services):
    app.dependency_overrides[get_services] = lambda: offline_services
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthEndpoint:
    def test_health_check_returns_ok(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestSubmitQuestion:
    def test_returns_202_with_run_id(self, client):
        with patch("api.routes.execute_run", new_callable=AsyncMock) as mock_execute:
            response = client.post("/api/question", json={"question": "¿Qué debo hacer si soy una fintech?"})

        assert response.status_code == 202
        data = response.json()
        assert data["status"] == "created"
        assert len(data["runId"]) == 36  # UUID format
        assert data["message"] == "Run created and agent started"
        mock_execute.assert_awaited_once()

    @pytest.mark.parametrize(
        "body",
        [{}, {"question": "too short"}, {"question": "x" * 2001}, {"question": 42}],
    )
    def test_invalid_body_rejected_without_creating_run(self, client, offline_services, body):
        response = client.post("/api/question", json=body)
        assert response.status_code == 422
        assert offline_services.store._store == {}

    def test_background_failure_does_not_break_request(self, client):
        with patch("api.routes.execute_run", new=AsyncMock(side_effect=RuntimeError("boom"))):
            response = client.post("/api/question", json={"question": "A question that will fail"})
        assert response.status_code == 202


class TestEndToEnd:
    def test_fintech_question_completes(self, client):
        response = client.post("/api/question", json={"question": "¿Qué debo hacer si soy una fintech?"})
        run_id = response.json()["runId"]

        run = client.get(f"/api/run/{run_id}").json()
        assert run["status"] == "completed"
        assert FINTECH_LAW_ID in run["selectedLawIds"]
        assert len(run["obligations"]) == len(run["selectedLawIds"])
        assert "does not constitute legal advice" in run["draftAnswer"]
        assert "completedAt" in run
        assert "error" not in run
        assert run["logs"][0].endswith("Agent execution started")

        answer = client.get(f"/api/answer/{run_id}").json()
        assert answer["runId"] == run_id
        assert answer["status"] == "completed"
        assert answer["answer"] == run["draftAnswer"]
        assert answer["laws"][0]["id"] in run["selectedLawIds"]
        assert answer["metrics"]["totalMs"] == run["totalMs"]
        assert answer["metrics"]["tools"]["llm"]["calls"] >= 2
        assert answer["obligations"][0]["lawId"] == run["selectedLawIds"][0]


class TestGetRun:
    def test_unknown_run_returns_404(self, client):
        assert client.get("/api/run/nope").status_code == 404

    def test_unknown_answer_returns_404(self, client):
        assert client.get("/api/answer/nope").status_code == 404

    @pytest.mark.asyncio
    async def test_created_run_is_visible(self, client, offline_services):
        run = create_run("Pending question text")
        await save_run(offline_services.store, run)

        data = client.get(f"/api/run/{run.id}").json()
        assert data["status"] == "created"
        assert data["logs"] == []

    @pytest.mark.asyncio
    async def test_answer_maps_unknown_laws_to_null(self, client, offline_services):
        run = create_run("Pending question text")
        run.selected_law_ids = [FINTECH_LAW_ID, "LEY_00000"]
        await save_run(offline_services.store, run)

        data = client.get(f"/api/answer/{run.id}").json()
        assert data["laws"][0]["name"] == "Law 21.521 (Fintech)"
        assert data["laws"][1] is None
        assert data["answer"] is None
        assert data["obligations"] == []
        assert data["metrics"] == {"totalMs": None, "tools": {}}


class TestListRuns:
    @pytest.mark.asyncio
    async def test_lists_runs_without_cache_entries(self, client, offline_services):
        run = create_run("Pending question text")
        await save_run(offline_services.store, run)
        await offline_services.store.put("law_text:LEY_21521", "cached")

        data = client.get("/api/runs").json()
        assert len(data) == 1
        assert data[0]["id"] == run.id
        assert data[0]["status"] == "created"
        assert "createdAt" in data[0]
