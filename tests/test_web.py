"""Tests for the web interface."""

import asyncio
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from conftest import FakeClientFactory, SAMPLE_PLAN
from forma.db import ExerciseRepository
from forma.web import create_app

USER_INPUTS = {"goals": ["hypertrophy"], "duration": "45 minutes", "equipment": "BARBELL", "days": 1}

DOCUMENT = (
    b"Program notes: perform the seated cable row and the pec deck fly for three sets each, "
    b"resting ninety seconds between sets."
)


@pytest.fixture
def factory():
    return FakeClientFactory(default=SAMPLE_PLAN)


@pytest.fixture
def client(settings, factory):
    with TestClient(create_app(settings, client_factory=factory)) as test_client:
        yield test_client


class TestPages:
    """Tests for HTML pages and health."""

    def test_planner_page(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "hypertrophy" in response.text.lower()

    def test_admin_page(self, client):
        response = client.get("/admin")
        assert response.status_code == 200
        assert "Shoulders" in response.text

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_startup_seeds_catalog(self, client):
        data = client.get("/api/exercises").json()
        assert data["count"] > 0
        assert data["count"] == len(data["exercises"])

    def test_catalog_filter(self, client):
        data = client.get("/api/exercises", params={"target_muscle": "Abs"}).json()
        assert data["exercises"]
        assert all(ex["target_muscle"] == "Abs" for ex in data["exercises"])


class TestGeneratePlan:
    """Tests for POST /api/generate-plan."""

    def test_success(self, client):
        response = client.post("/api/generate-plan", json={"userInputs": USER_INPUTS})
        assert response.status_code == 200

        exercises = response.json()["schedule"][0]["exercises"]
        assert exercises[0]["name"] == "Bench Press"
        assert exercises[0]["science_note"]
        assert exercises[1]["name"] == "Exercise 999"

    def test_missing_user_inputs(self, client):
        response = client.post("/api/generate-plan", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing userInputs in request body"}

    def test_missing_goals(self, client):
        response = client.post("/api/generate-plan", json={"userInputs": {**USER_INPUTS, "goals": []}})
        assert response.status_code == 400

    def test_invalid_body(self, client):
        response = client.post(
            "/api/generate-plan", content="nope", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400

    def test_non_list_goals(self, client):
        response = client.post("/api/generate-plan", json={"userInputs": {**USER_INPUTS, "goals": 5}})
        assert response.status_code == 400
        assert response.json() == {"error": "At least one goal is required"}

    def test_body_not_utf8(self, client):
        response = client.post(
            "/api/generate-plan",
            content=b'{"userInputs": "\xff\xfe"}',
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Request body must be JSON"}

    def test_blueprint_body_not_utf8(self, client):
        response = client.post(
            "/api/blueprint", content=b"\xff\xfe", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400

    def test_no_matching_exercises(self, client):
        repo = ExerciseRepository(client.app.state.db_path)
        for exercise in asyncio.run(repo.get_by_equipment(["Bodyweight"])):
            asyncio.run(repo.delete(exercise.id))

        response = client.post("/api/generate-plan", json={"userInputs": {**USER_INPUTS, "equipment": "Kettlebell"}})
        assert response.status_code == 404
        assert "No exercises found" in response.json()["error"]

    def test_all_keys_rate_limited(self, client, factory):
        factory.default = RuntimeError("429 Too Many Requests")
        response = client.post("/api/generate-plan", json={"userInputs": USER_INPUTS})

        assert response.status_code == 429
        assert "capacity" in response.json()["error"]
        assert factory.calls == ["Key 1 (Primary)", "Key 2 (Backup)"]

    def test_unexpected_error(self, client, factory):
        factory.default = RuntimeError("connection reset")
        response = client.post("/api/generate-plan", json={"userInputs": USER_INPUTS})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate workout plan", "details": "connection reset"}

    def test_no_keys_configured(self, settings, factory):
        app = create_app(replace(settings, api_keys=()), client_factory=factory)
        with TestClient(app) as client:
            response = client.post("/api/generate-plan", json={"userInputs": USER_INPUTS})

        assert response.status_code == 500
        assert "No API keys configured" in response.json()["error"]


class TestBlueprint:
    """Tests for POST /api/blueprint."""

    def test_pdf_download(self, client):
        plan = client.post("/api/generate-plan", json={"userInputs": USER_INPUTS}).json()
        response = client.post("/api/blueprint", json=plan)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert "FORMA_Blueprint.pdf" in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    def test_invalid_plan(self, client):
        response = client.post("/api/blueprint", json={"days": []})
        assert response.status_code == 400


class TestAdmin:
    """Tests for admin endpoints."""

    def test_pin_correct(self, client):
        assert client.post("/api/admin/pin", data={"pin": "1234"}).json() == {"success": True}

    def test_pin_wrong(self, client):
        assert client.post("/api/admin/pin", data={"pin": "0000"}).json() == {"success": False}

    def test_add_exercise(self, client):
        response = client.post(
            "/api/admin/exercises",
            data={
                "name": "Seated Cable Row",
                "target_muscle": "Back",
                "equipment": ["Cables", "Machine"],
                "difficulty_tier": "1",
                "science_note": "Keep the torso still.",
            },
        )
        assert response.status_code == 200
        exercise = response.json()["exercise"]
        assert exercise["id"]
        assert exercise["equipment"] == ["Cables", "Machine"]
        assert exercise["difficulty_tier"] == 1

    def test_add_exercise_without_name(self, client):
        response = client.post("/api/admin/exercises", data={"target_muscle": "Back", "equipment": ["Cables"]})
        assert response.status_code == 400

    def test_ingest(self, client, factory):
        factory.default = [
            {"name": "Seated Cable Row", "target_muscle": "lats", "equipment": ["Cables"], "difficulty": "Beginner"},
            {"name": "BENCH PRESS", "target_muscle": "Chest", "equipment": ["Barbell"]},
        ]
        response = client.post(
            "/api/admin/ingest", files={"file": ("notes.txt", DOCUMENT, "text/plain")}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["count"] == 1
        assert data["duplicates"] == 1
        assert data["exercises"] == ["Seated Cable Row"]

        back = client.get("/api/exercises", params={"target_muscle": "Back"}).json()["exercises"]
        assert "Seated Cable Row" in [ex["name"] for ex in back]

    def test_ingest_unsupported_file(self, client):
        response = client.post(
            "/api/admin/ingest", files={"file": ("photo.png", b"\x89PNG....", "image/png")}
        )
        assert response.status_code == 400
        assert "Unsupported file type" in response.json()["error"]

    def test_ingest_without_file(self, client):
        response = client.post("/api/admin/ingest")
        assert response.status_code == 400
