"""Boundary Protocols — contracts between the HTTP shell and the store.

Invariants:
    - Routes depend on the StudentRepository contract, not on SQLAlchemy
    - Every method is one statement against the store; none retries

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Protocol

from app.core.domain_types import StudentId
from app.schemas.student import Student


class StudentRepository(Protocol):
    """Contract for student persistence — implemented by services/student_store.py."""
    async def list_all(self) -> list[Student]: ...
    async def get(self, student_id: StudentId) -> Student: ...
    async def insert(self, first_name: str, last_name: str) -> StudentId: ...
    async def update(self, student: Student) -> None: ...
    async def delete(self, student_id: StudentId) -> None: ...
