"""Student Records API client.

A thin wrapper around the HTTP routes of the Student Records API using
the ``requests`` library.  Each method returns a tuple ``(data,
error)``: on success ``error`` is ``None``; on failure ``data`` is
``None`` and ``error`` is a dictionary with the keys ``status_code``,
``message`` and ``errors`` (the list of validation messages for a 400
response, otherwise empty).

Example::

    client = StudentRecordsClient(base_url="http://localhost:5000")
    student, error = client.create_student(name="Ada", email="ada@example.com")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class StudentRecordsClient:
    """Client for a running Student Records API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API, e.g. ``http://localhost:5000``.
            timeout: Seconds to wait for each request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            return None, self._error_from_response(exc.response, exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "errors": []}

        if not response.content:
            return None, None
        content_type = response.headers.get("content-type", "")
        if content_type.startswith("application/json"):
            return response.json(), None
        return response.text, None

    @staticmethod
    def _error_from_response(response: Optional[requests.Response], exc: Exception) -> Dict[str, Any]:
        status = response.status_code if response is not None else None
        message = ""
        errors: List[str] = []
        if response is not None:
            try:
                body = response.json()
            except ValueError:
                message = response.text
            else:
                if isinstance(body, dict):
                    errors = list(body.get("errors") or [])
                    message = body.get("message") or "; ".join(errors)
                else:
                    message = str(body)
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "message": message, "errors": errors}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def health(self) -> Result:
        """Fetch the liveness banner."""
        return self._request("GET", "/")

    def list_students(self) -> Result:
        data, error = self._request("GET", "/students")
        if error:
            return None, error
        return data or [], None

    def get_student(self, student_id: int) -> Result:
        return self._request("GET", f"/students/{student_id}")

    def create_student(self, **fields: Any) -> Result:
        """Create a student from keyword fields (``name``, ``email``, ``age``, ``grade``)."""
        return self._request("POST", "/students", json_body=fields)

    def update_student(self, student_id: int, **fields: Any) -> Result:
        """Patch a student.  Pass ``age=None`` or ``grade=None`` to clear them."""
        return self._request("PATCH", f"/students/{student_id}", json_body=fields)

    def delete_student(self, student_id: int) -> Result:
        return self._request("DELETE", f"/students/{student_id}")
