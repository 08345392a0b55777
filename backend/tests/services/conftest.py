"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db_manager dependency overridden so routes use the test pool
    - unmigrated_db_manager has no students table: every store call fails until migrated

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Schema from Base.metadata here; test_migrations.py covers the alembic path
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager, get_db_manager
from app.main import app
from app.services.student_store import StudentStore

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(MEMORY_URL)
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
async def unmigrated_db_manager():
    manager = DatabaseSessionManager(MEMORY_URL)
    yield manager
    await manager.dispose()


@pytest.fixture
def store(db_manager):
    return StudentStore(db_manager)


async def _client_for(manager: DatabaseSessionManager):
    app.dependency_overrides[get_db_manager] = lambda: manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def client(db_manager):
    """FastAPI test client backed by the per-test database."""
    async for c in _client_for(db_manager):
        yield c


@pytest.fixture
async def broken_client(unmigrated_db_manager):
    """FastAPI test client whose store fails on every query."""
    async for c in _client_for(unmigrated_db_manager):
        yield c
