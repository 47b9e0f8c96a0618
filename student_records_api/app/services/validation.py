"""
Field rules for student payloads.

``validate_student_payload`` checks a candidate mapping and returns the
list of violations, in field order, without raising and without
touching any state.  Two modes exist:

* ``STRICT`` (create): ``name`` and ``email`` must be present.
* ``PARTIAL`` (update): only the fields present in the payload are
  checked.

A field explicitly set to ``None`` counts as present.  For ``age`` and
``grade`` that means "clear the value"; for ``name`` and ``email`` it
is simply an invalid value, as is any value that is not a string.
"""

import re
from enum import Enum
from typing import Any, List, Mapping, Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_NAME_LENGTH = 2
MIN_AGE = 1
MAX_AGE = 150


class ValidationMode(str, Enum):
    STRICT = "strict"
    PARTIAL = "partial"


def normalize_email(value: Any) -> str:
    """Trim and lower‑case an email value (``None`` becomes ``""``)."""
    return str(value if value is not None else "").strip().lower()


def normalize_name(value: Any) -> str:
    return str(value if value is not None else "").strip()


def coerce_age(value: Any) -> Optional[int]:
    """Convert ``value`` to an ``int`` or return ``None`` if it cannot be.

    Integral floats (``30.0``) and numeric strings (``" 30 "``) are
    accepted.  Booleans are rejected even though ``bool`` subclasses
    ``int``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def validate_student_payload(payload: Mapping[str, Any], mode: ValidationMode) -> List[str]:
    """Return every rule the payload breaks, in order name, email, age, grade."""
    errors: List[str] = []
    strict = mode == ValidationMode.STRICT

    if "name" in payload:
        name = payload["name"]
        if not isinstance(name, str) or len(normalize_name(name)) < MIN_NAME_LENGTH:
            errors.append(f"name must be at least {MIN_NAME_LENGTH} characters")
    elif strict:
        errors.append("name is required")

    if "email" in payload:
        email = payload["email"]
        if not isinstance(email, str) or not EMAIL_PATTERN.match(normalize_email(email)):
            errors.append("email must be a valid email address")
    elif strict:
        errors.append("email is required")

    if "age" in payload and payload["age"] is not None:
        age = coerce_age(payload["age"])
        if age is None:
            errors.append("age must be an integer")
        elif age < MIN_AGE or age > MAX_AGE:
            errors.append(f"age must be between {MIN_AGE} and {MAX_AGE}")

    if "grade" in payload and payload["grade"] is not None:
        if not isinstance(payload["grade"], str):
            errors.append("grade must be a string")

    return errors
