"""
Business logic for student records.

``StudentService`` implements list, get, create, patch and delete on
top of ``JsonStudentStore``.  Every call loads the collection afresh,
works on that private copy and, for mutating calls, saves it before
returning.  Nothing is cached between calls.

All failures are raised before anything is saved, so a rejected
request never changes the stored document.  The read/write lock keeps
each load‑modify‑save cycle from interleaving with another request.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

from ..core.errors import Conflict, NotFound, ValidationFailed
from ..core.locking import ReadWriteLock
from ..core.storage import JsonStudentStore
from ..schemas.student import StudentCollection, StudentRecord
from .validation import (
    ValidationMode,
    coerce_age,
    normalize_email,
    normalize_name,
    validate_student_payload,
)


logger = logging.getLogger(__name__)

DEFAULT_GRADE = "Not specified"


def utc_timestamp() -> str:
    """Current UTC time as ISO‑8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class StudentService:
    """Service for managing student records."""

    def __init__(self, store: JsonStudentStore, lock: Optional[ReadWriteLock] = None) -> None:
        self.store = store
        self.lock = lock or ReadWriteLock()
        self._last_id = 0

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------
    def list_students(self) -> List[StudentRecord]:
        """Return every student in insertion order."""
        with self.lock.read():
            return self.store.load().students

    def get_student(self, student_id: int) -> StudentRecord:
        """Return the student with ``student_id`` or raise ``NotFound``."""
        with self.lock.read():
            collection = self.store.load()
            return self._find(collection, student_id)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------
    def create_student(self, payload: Any) -> StudentRecord:
        """Validate ``payload`` and append a new student.

        ``grade`` defaults to ``"Not specified"`` when omitted; ``age``
        stays unknown when omitted or ``null``.
        """
        payload = self._as_mapping(payload)
        errors = validate_student_payload(payload, ValidationMode.STRICT)
        if errors:
            raise ValidationFailed(errors)

        email = normalize_email(payload["email"])
        with self.lock.write():
            collection = self.store.load()
            if self._email_taken(collection, email):
                logger.info("Rejected create: email already used by another student")
                raise Conflict()

            if "grade" not in payload:
                grade = DEFAULT_GRADE
            elif payload["grade"] is None:
                grade = None
            else:
                grade = payload["grade"].strip()

            student = StudentRecord(
                id=self._next_id(collection),
                name=normalize_name(payload["name"]),
                email=email,
                age=coerce_age(payload["age"]) if payload.get("age") is not None else None,
                grade=grade,
                created_at=utc_timestamp(),
            )
            collection.students.append(student)
            self.store.save(collection)
        logger.info("Created student %s", student.id)
        return student

    def update_student(self, student_id: int, payload: Any) -> StudentRecord:
        """Apply the fields present in ``payload`` to an existing student.

        Absent fields are left alone.  ``age: null`` and ``grade: null``
        clear those fields.
        """
        payload = self._as_mapping(payload)
        with self.lock.write():
            collection = self.store.load()
            student = self._find(collection, student_id)

            errors = validate_student_payload(payload, ValidationMode.PARTIAL)
            if errors:
                raise ValidationFailed(errors)

            if "email" in payload:
                email = normalize_email(payload["email"])
                if self._email_taken(collection, email, exclude_id=student_id):
                    logger.info("Rejected update of %s: email already used by another student", student_id)
                    raise Conflict()
                student.email = email
            if "name" in payload:
                student.name = normalize_name(payload["name"])
            if "age" in payload:
                student.age = coerce_age(payload["age"]) if payload["age"] is not None else None
            if "grade" in payload:
                student.grade = payload["grade"].strip() if payload["grade"] is not None else None

            student.updated_at = utc_timestamp()
            self.store.save(collection)
        logger.info("Updated student %s (%s)", student_id, ", ".join(sorted(payload)) or "no fields")
        return student

    def delete_student(self, student_id: int) -> None:
        """Remove the student with ``student_id`` or raise ``NotFound``."""
        with self.lock.write():
            collection = self.store.load()
            student = self._find(collection, student_id)
            collection.students.remove(student)
            self.store.save(collection)
        logger.info("Deleted student %s", student_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _as_mapping(payload: Any) -> Mapping[str, Any]:
        if payload is None:
            return {}
        if not isinstance(payload, Mapping):
            raise ValidationFailed(["request body must be a JSON object"])
        return payload

    @staticmethod
    def _find(collection: StudentCollection, student_id: int) -> StudentRecord:
        for student in collection.students:
            if student.id == student_id:
                return student
        raise NotFound()

    @staticmethod
    def _email_taken(collection: StudentCollection, email: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            s.id != exclude_id and (s.email or "").lower() == email
            for s in collection.students
        )

    def _next_id(self, collection: StudentCollection) -> int:
        """Millisecond clock value, bumped past every id seen so far.

        Called under the write lock, so ids are strictly increasing for
        the lifetime of the service even when several creates land in
        the same millisecond.
        """
        highest = max((s.id for s in collection.students), default=0)
        new_id = max(int(time.time() * 1000), self._last_id + 1, highest + 1)
        self._last_id = new_id
        return new_id
