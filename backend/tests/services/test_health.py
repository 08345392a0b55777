"""Health probes — liveness always up, readiness tracks the database."""

from app.infrastructure.database import DatabaseSessionManager, get_db_manager
from app.main import app


async def test_liveness_returns_200(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_returns_200_with_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_returns_503_when_database_unreachable(client, tmp_path):
    unreachable = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path}/missing/dir/students.db",
    )
    app.dependency_overrides[get_db_manager] = lambda: unreachable

    res = await client.get("/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
    await unreachable.dispose()
