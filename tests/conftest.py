from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from employee_api.core.config import Settings
from employee_api.core.database import Database
from employee_api.main import app
from employee_api.models.employee import Employee
from employee_api.repositories.employee_repository import EmployeeRepository


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _database_settings(tmp_path):
    from employee_api.core.config import settings

    original_url = settings.DATABASE_URL
    original_seed = settings.SEED_FILE
    settings.DATABASE_URL = f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    settings.SEED_FILE = ""
    yield
    settings.DATABASE_URL = original_url
    settings.SEED_FILE = original_seed


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def database(tmp_path):
    db = Database()
    await db.initialize(Settings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'repo.db'}"))
    yield db
    await db.close()


@pytest.fixture
async def repository(database):
    async with database.session_factory() as session:
        yield EmployeeRepository(session)


@pytest.fixture
def employee():
    return Employee(first_name="Chamara", last_name="Wijesekara", email="abc@abc.com")
