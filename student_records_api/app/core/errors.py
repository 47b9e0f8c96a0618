"""
Error kinds raised by the student record service.

Every failure the service can report belongs to one of the classes
below.  Each carries the HTTP status code the transport layer should
answer with and a ``to_dict`` method returning the response body, so
the exception handlers in ``main`` stay a simple mapping.
"""

from typing import Any, Dict, List


class StudentRecordsError(Exception):
    """Base class for all errors raised by the service."""

    status_code: int = 500

    def __init__(self, message: str = "Server error") -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationFailed(StudentRecordsError):
    """The payload broke one or more field rules.

    ``violations`` keeps the messages in field order (name, email, age,
    grade).
    """

    status_code = 400

    def __init__(self, violations: List[str]) -> None:
        super().__init__("; ".join(violations))
        self.violations = list(violations)

    def to_dict(self) -> Dict[str, Any]:
        return {"errors": self.violations}


class Conflict(StudentRecordsError):
    """Another record already uses the requested email."""

    status_code = 409

    def __init__(self, message: str = "Email already exists") -> None:
        super().__init__(message)


class NotFound(StudentRecordsError):
    """No record has the requested id."""

    status_code = 404

    def __init__(self, message: str = "Student not found") -> None:
        super().__init__(message)


class PersistenceFailure(StudentRecordsError):
    """The data file could not be written.

    The message is kept for logs only; clients receive a generic body.
    """

    status_code = 500

    def to_dict(self) -> Dict[str, Any]:
        return {"message": "Server error"}
