"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - app.state.db_manager points at the test engine for the duration of a test
    - Lifespan does not run under ASGITransport, so no real database is touched
    - frozen_today pins the default exercise date through a dependency override
"""

from datetime import date

import pytest
from fastapi import Depends
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_exercise_service
from app.infrastructure.database import get_db
from app.infrastructure.repositories import SqlExerciseRepository, SqlUserRepository
from app.main import app
from app.services.exercise_service import ExerciseService

FROZEN_TODAY = date(2024, 5, 17)


@pytest.fixture
async def client(db_manager):
    """Test client with the app's database handle swapped for the test one."""
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    del app.state.db_manager


@pytest.fixture
def frozen_today():
    def _service(db=Depends(get_db)):
        return ExerciseService(
            SqlUserRepository(db), SqlExerciseRepository(db),
            today=lambda: FROZEN_TODAY,
        )

    app.dependency_overrides[get_exercise_service] = _service
    return FROZEN_TODAY


@pytest.fixture
def create_user(client):
    async def _create(username: str = "amy") -> dict:
        res = await client.post("/api/users", data={"username": username})
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
def add_exercise(client):
    async def _add(user_id: str, **fields) -> dict:
        data = {"description": "run", "duration": "30", **fields}
        res = await client.post(f"/api/users/{user_id}/exercises", data=data)
        assert res.status_code == 200, res.text
        return res.json()
    return _add
