"""Startup migrations — alembic revisions applied through the app's own engine.

Invariants:
    - run_migrations creates the students table on an empty database
    - Re-running is a no-op (already at head)
    - The migrated table behaves like the ORM model (autoincrement ids)
"""

from sqlalchemy import inspect, text

from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.migrations import SCRIPT_LOCATION, run_migrations
from app.services.student_store import StudentStore


async def _table_names(manager: DatabaseSessionManager) -> set[str]:
    async with manager.engine.connect() as conn:
        return set(await conn.run_sync(lambda c: inspect(c).get_table_names()))


async def test_script_location_points_at_alembic_dir():
    assert (SCRIPT_LOCATION / "env.py").is_file()


async def test_migrations_create_students_table(unmigrated_db_manager):
    await run_migrations(unmigrated_db_manager.engine)

    assert "students" in await _table_names(unmigrated_db_manager)
    async with unmigrated_db_manager.engine.connect() as conn:
        version = (await conn.execute(text("SELECT version_num FROM alembic_version"))).scalar_one()
    assert version == "001_students"


async def test_migrations_are_idempotent(unmigrated_db_manager):
    await run_migrations(unmigrated_db_manager.engine)
    await run_migrations(unmigrated_db_manager.engine)

    assert "students" in await _table_names(unmigrated_db_manager)


async def test_store_works_on_migrated_schema(unmigrated_db_manager):
    await run_migrations(unmigrated_db_manager.engine)
    store = StudentStore(unmigrated_db_manager)

    first = await store.insert("Ada", "Lovelace")
    await store.delete(first)
    second = await store.insert("Ada", "Lovelace")

    assert second > first
    assert [s.id for s in await store.list_all()] == [second]


async def test_migrations_against_database_file(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path}/students.db")
    try:
        await run_migrations(manager.engine)
        assert "students" in await _table_names(manager)
    finally:
        await manager.dispose()
