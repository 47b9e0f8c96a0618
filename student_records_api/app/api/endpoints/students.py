"""
Student endpoints.

CRUD routes for student records.  Handlers are thin: they parse the
path id, hand the raw JSON body to ``StudentService`` and let the
exception handlers registered in ``main`` turn service errors into
responses (400 validation, 404 not found, 409 email conflict).

Handlers are plain ``def`` functions so FastAPI runs them in its
thread pool; the service's read/write lock does the serialization.
"""

import re
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, status

from student_records_api.app.core.errors import NotFound
from student_records_api.app.schemas.student import DeleteConfirmation, StudentRecord
from student_records_api.app.services.student_service import StudentService

router = APIRouter()

_ID_PATTERN = re.compile(r"-?[0-9]+")


def get_student_service(request: Request) -> StudentService:
    """Return the service instance created by ``create_app``."""
    return request.app.state.student_service


def parse_student_id(raw: str) -> int:
    """Turn a path segment into an id; non‑numeric ids match nothing."""
    if not _ID_PATTERN.fullmatch(raw):
        raise NotFound()
    return int(raw)


@router.get("", response_model=List[StudentRecord], response_model_exclude_none=True)
def list_students(service: StudentService = Depends(get_student_service)) -> List[StudentRecord]:
    """Return all students in the order they were created."""
    return service.list_students()


@router.get("/{student_id}", response_model=StudentRecord, response_model_exclude_none=True)
def get_student(
    student_id: str,
    service: StudentService = Depends(get_student_service),
) -> StudentRecord:
    """Retrieve a single student by ID.

    Returns HTTP 404 if the student does not exist or the ID is not a
    number.
    """
    return service.get_student(parse_student_id(student_id))


@router.post(
    "",
    response_model=StudentRecord,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_student(
    payload: Any = Body(None),
    service: StudentService = Depends(get_student_service),
) -> StudentRecord:
    """Create a student.

    ``name`` and ``email`` are required; ``age`` and ``grade`` are
    optional.  Responds 400 with the list of violations, or 409 when
    the email is already used.
    """
    return service.create_student(payload)


@router.patch("/{student_id}", response_model=StudentRecord, response_model_exclude_none=True)
def update_student(
    student_id: str,
    payload: Any = Body(None),
    service: StudentService = Depends(get_student_service),
) -> StudentRecord:
    """Partially update a student.

    Only the fields sent are changed.  Sending ``null`` for ``age`` or
    ``grade`` clears it.
    """
    return service.update_student(parse_student_id(student_id), payload)


@router.delete("/{student_id}", response_model=DeleteConfirmation)
def delete_student(
    student_id: str,
    service: StudentService = Depends(get_student_service),
) -> DeleteConfirmation:
    """Delete a student."""
    service.delete_student(parse_student_id(student_id))
    return DeleteConfirmation(message="Student deleted")
