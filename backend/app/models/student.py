"""Student ORM — the single persisted entity.

Invariants:
    - id is an autoincrement integer primary key assigned by the store
    - first_name/last_name are plain text; no uniqueness, duplicates allowed
    - Table layout mirrors alembic revision 001_students

Design Decisions:
    - sqlite_autoincrement: ids are never reused after a delete on SQLite
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Student(Base):
    """Student row."""
    __tablename__ = "students"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
