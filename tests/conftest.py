"""Pytest configuration and fixtures."""

import asyncio
import json
import tempfile
from pathlib import Path

import pytest

from forma.config import ApiCredential, Settings
from forma.db import ExerciseRepository, init_db, seed_exercises


class FakeClient:
    """Generation client that replays a scripted reply or error."""

    def __init__(self, credential: ApiCredential, outcome):
        self.credential = credential
        self.outcome = outcome
        self.prompts: list[str] = []

    async def generate_json(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        if isinstance(self.outcome, str):
            return self.outcome
        return json.dumps(self.outcome)


class FakeClientFactory:
    """Hands out FakeClients; outcomes are keyed by credential name.

    ``default`` is used for names with no entry.
    """

    def __init__(self, outcomes: dict | None = None, default=None):
        self.outcomes = outcomes or {}
        self.default = default
        self.calls: list[str] = []
        self.clients: list[FakeClient] = []

    def __call__(self, credential: ApiCredential) -> FakeClient:
        self.calls.append(credential.name)
        client = FakeClient(credential, self.outcomes.get(credential.name, self.default))
        self.clients.append(client)
        return client


SAMPLE_PLAN = {
    "schedule": [
        {
            "day_name": "Day 1 - Push",
            "exercises": [
                {"id": 1, "sets": 4, "reps": "8-10", "note": "Controlled tempo"},
                {"id": 999, "sets": 3, "reps": "12", "note": "Model note"},
            ],
        }
    ]
}


def run(coro):
    """Run a coroutine to completion."""
    return asyncio.run(coro)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def empty_repo(temp_db_path):
    """Repository over an initialized but empty catalog."""
    run(init_db(temp_db_path))
    return ExerciseRepository(temp_db_path)


@pytest.fixture
def seeded_repo(temp_db_path):
    """Repository over the starter catalog."""
    run(init_db(temp_db_path))
    run(seed_exercises(temp_db_path))
    return ExerciseRepository(temp_db_path)


@pytest.fixture
def settings(tmp_path):
    """Settings with two pool keys, a PIN, and a temporary data dir."""
    return Settings(
        api_keys=("key-one", "key-two", None),
        admin_pin="1234",
        data_dir=tmp_path / "data",
        log_level="WARNING",
    )
