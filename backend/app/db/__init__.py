"""Database Metadata — the SQLAlchemy declarative Base shared by models and alembic.

Design Decisions:
    - aiosqlite driver for SQLite, asyncpg for PostgreSQL: native async drivers
"""
