"""Students Routes — five thin adapters over the student store.

Invariants:
    - Each request invokes exactly one store operation
    - Success is always 200; add returns the new id as a bare JSON integer,
      edit and delete return an empty body
    - Store failures are raised, never handled here: the global error handlers
      turn them into 503 (and not-found into NOT_FOUND_STATUS)

Design Decisions:
    - Store injected per request via Depends(get_student_store): handlers hold
      no module-level database state and tests override one dependency
    - Typed as the StudentRepository protocol so any implementation can stand in
    - Path ids bounded to the signed 64-bit range: oversized ids fail validation (400)
      instead of overflowing the driver
    - The list is served with and without the trailing slash, no redirect
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from app.core.domain_types import STUDENT_ID_MAX, STUDENT_ID_MIN, StudentId
from app.core.repository_protocols import StudentRepository
from app.infrastructure.database import DatabaseSessionManager, get_db_manager
from app.schemas.student import Student, StudentCreate, StudentUpdate
from app.services.student_store import StudentStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/students", tags=["students"])

StudentIdPath = Annotated[int, Path(ge=STUDENT_ID_MIN, le=STUDENT_ID_MAX)]


def get_student_store(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> StudentRepository:
    return StudentStore(db)


@router.get("", response_model=list[Student], include_in_schema=False)
@router.get("/", response_model=list[Student])
async def get_all_students(store: StudentRepository = Depends(get_student_store)):
    """List every student ordered by first name, then last name."""
    return await store.list_all()


@router.get("/{student_id}", response_model=Student)
async def get_student(
    student_id: StudentIdPath, store: StudentRepository = Depends(get_student_store),
):
    """Get one student."""
    return await store.get(StudentId(student_id))


@router.post("/add", response_model=int)
async def add_student(
    body: StudentCreate, store: StudentRepository = Depends(get_student_store),
):
    """Add a student. Returns the id the store assigned."""
    return await store.insert(body.first_name, body.last_name)


@router.put("/edit")
async def update_student(
    body: StudentUpdate, store: StudentRepository = Depends(get_student_store),
):
    """Replace both names of the student with body.id. Missing ids are a no-op."""
    await store.update(body)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/delete/{student_id}")
async def delete_student(
    student_id: StudentIdPath, store: StudentRepository = Depends(get_student_store),
):
    """Delete a student. Missing ids are a no-op."""
    await store.delete(StudentId(student_id))
    return Response(status_code=status.HTTP_200_OK)
