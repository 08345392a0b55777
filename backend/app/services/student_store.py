"""Student Store — the five single-statement operations over the students table.

Invariants:
    - Each operation opens its own session and issues exactly one statement
    - Nothing is cached between calls; every read goes to the table
    - list_all orders by (first_name, last_name) using the store's collation
    - update/delete of a missing id affect zero rows and are not errors
    - Store failures surface as DatabaseError (mapped by DatabaseSessionManager)

Design Decisions:
    - The store holds the pool, not a request-scoped session: one borrow per
      operation keeps statement-level atomicity and nothing wider
    - Core statements (insert/update/delete) over ORM unit-of-work: the SQL
      sent is the SQL described, no implicit SELECT before UPDATE/DELETE
"""

import logging

from sqlalchemy import delete, insert, select, update

from app.core.domain_types import StudentId
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.infrastructure.database import DatabaseSessionManager
from app.models.student import Student as StudentModel
from app.schemas.student import Student

logger = logging.getLogger(__name__)


class StudentStore:
    """StudentRepository backed by the shared SQLAlchemy async engine."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def list_all(self) -> list[Student]:
        async with self._db.session() as session:
            result = await session.execute(
                select(StudentModel).order_by(
                    StudentModel.first_name, StudentModel.last_name,
                ),
            )
            return [Student.model_validate(row) for row in result.scalars()]

    async def get(self, student_id: StudentId) -> Student:
        async with self._db.session() as session:
            result = await session.execute(
                select(StudentModel).where(StudentModel.id == student_id),
            )
            row = result.scalar_one_or_none()
        if row is None:
            raise ResourceNotFoundError(
                "Student", str(student_id),
                ErrorContext(student_id=student_id, operation="get"),
            )
        return Student.model_validate(row)

    async def insert(self, first_name: str, last_name: str) -> StudentId:
        async with self._db.session() as session:
            result = await session.execute(
                insert(StudentModel)
                .values(first_name=first_name, last_name=last_name)
                .returning(StudentModel.id),
            )
            new_id = result.scalar_one()
            await session.commit()
        logger.info(
            f"Student {new_id} added",
            extra={"student_id": new_id, "operation": "insert"},
        )
        return StudentId(new_id)

    async def update(self, student: Student) -> None:
        async with self._db.session() as session:
            result = await session.execute(
                update(StudentModel)
                .where(StudentModel.id == student.id)
                .values(first_name=student.first_name, last_name=student.last_name),
            )
            await session.commit()
        if result.rowcount == 0:
            logger.debug(
                f"Update matched no student {student.id}",
                extra={"student_id": student.id, "operation": "update"},
            )

    async def delete(self, student_id: StudentId) -> None:
        async with self._db.session() as session:
            result = await session.execute(
                delete(StudentModel).where(StudentModel.id == student_id),
            )
            await session.commit()
        logger.info(
            f"Delete of student {student_id} affected {result.rowcount} row(s)",
            extra={"student_id": student_id, "operation": "delete"},
        )
