"""ORM Models — SQLAlchemy declarative models.

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete for alembic and tests
"""

from app.models.student import Student  # noqa: F401
