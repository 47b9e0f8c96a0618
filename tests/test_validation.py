import pytest

from student_records_api.app.services.validation import (
    ValidationMode,
    coerce_age,
    normalize_email,
    validate_student_payload,
)

STRICT = ValidationMode.STRICT
PARTIAL = ValidationMode.PARTIAL


def test_valid_create_payload_has_no_violations():
    payload = {"name": "Bob", "email": "bob@example.com", "age": 20, "grade": "B"}
    assert validate_student_payload(payload, STRICT) == []


def test_strict_mode_requires_name_and_email():
    assert validate_student_payload({}, STRICT) == ["name is required", "email is required"]


def test_partial_mode_ignores_missing_fields():
    assert validate_student_payload({}, PARTIAL) == []
    assert validate_student_payload({"grade": "C"}, PARTIAL) == []


def test_violations_are_collected_in_field_order():
    """All broken rules are reported, name first, then email, then age."""
    payload = {"name": "a", "email": "bad", "age": 200}
    assert validate_student_payload(payload, STRICT) == [
        "name must be at least 2 characters",
        "email must be a valid email address",
        "age must be between 1 and 150",
    ]


def test_grade_type_is_reported_last():
    payload = {"grade": 5, "age": "x", "name": " "}
    assert validate_student_payload(payload, PARTIAL) == [
        "name must be at least 2 characters",
        "age must be an integer",
        "grade must be a string",
    ]


def test_name_is_trimmed_before_length_check():
    assert validate_student_payload({"name": "  a  "}, PARTIAL) == ["name must be at least 2 characters"]
    assert validate_student_payload({"name": " ab "}, PARTIAL) == []


def test_null_name_and_email_are_invalid_values():
    assert validate_student_payload({"name": None, "email": None}, STRICT) == [
        "name must be at least 2 characters",
        "email must be a valid email address",
    ]


@pytest.mark.parametrize("email", ["plain", "a@b", "a b@c.d", "@c.d", "a@.", "a@@b.c"])
def test_bad_emails_are_rejected(email):
    assert validate_student_payload({"email": email}, PARTIAL) == ["email must be a valid email address"]


def test_email_is_checked_after_normalizing():
    assert validate_student_payload({"email": "  Ada@Example.COM "}, PARTIAL) == []
    assert normalize_email("  Ada@Example.COM ") == "ada@example.com"


@pytest.mark.parametrize("age", [1, 150, "42", " 7 ", 30.0])
def test_ages_in_range_are_accepted(age):
    assert validate_student_payload({"age": age}, PARTIAL) == []


@pytest.mark.parametrize("age", [0, 151, -3, "0"])
def test_ages_out_of_range_are_rejected(age):
    assert validate_student_payload({"age": age}, PARTIAL) == ["age must be between 1 and 150"]


@pytest.mark.parametrize("age", [True, 30.5, "abc", "", [], {}])
def test_non_integer_ages_are_rejected(age):
    assert validate_student_payload({"age": age}, PARTIAL) == ["age must be an integer"]


def test_null_age_and_grade_are_accepted_as_clear_markers():
    assert validate_student_payload({"age": None, "grade": None}, PARTIAL) == []


def test_coerce_age():
    assert coerce_age("12") == 12
    assert coerce_age(12.0) == 12
    assert coerce_age(False) is None
    assert coerce_age("1.5") is None
    assert coerce_age(None) is None


def test_validation_is_deterministic_and_does_not_touch_input():
    payload = {"name": "x", "email": "nope"}
    first = validate_student_payload(payload, STRICT)
    second = validate_student_payload(payload, STRICT)
    assert first == second
    assert payload == {"name": "x", "email": "nope"}


@pytest.mark.parametrize("value", [["Ada Lovelace"], {"first": "Ada"}, {}, True, 42])
def test_non_text_names_are_rejected(value):
    assert validate_student_payload({"name": value}, PARTIAL) == ["name must be at least 2 characters"]


@pytest.mark.parametrize("value", [["ada@example.com"], {"address": "ada@example.com"}, False, 12])
def test_non_text_emails_are_rejected(value):
    assert validate_student_payload({"email": value}, PARTIAL) == ["email must be a valid email address"]
