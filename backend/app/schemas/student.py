"""Student Schemas — Pydantic models for the /students API boundary.

Invariants:
    - Student is the one entity shape returned by the API: id, first_name, last_name
    - StudentCreate ignores any client-supplied id (the store assigns it)
    - No validation beyond type shape; names may be empty or repeated

Design Decisions:
    - from_attributes on Student: built straight from ORM rows, no hand-written dicts
    - StudentUpdate subclasses Student: PUT /students/edit carries the full entity
"""

from pydantic import BaseModel, ConfigDict, Field

from app.core.domain_types import STUDENT_ID_MAX, STUDENT_ID_MIN


class StudentCreate(BaseModel):
    """POST /students/add body — id, if sent, is dropped."""
    first_name: str
    last_name: str


class Student(BaseModel):
    """A persisted student."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(ge=STUDENT_ID_MIN, le=STUDENT_ID_MAX)
    first_name: str
    last_name: str


class StudentUpdate(Student):
    """PUT /students/edit body — replaces both names of the row with this id."""
