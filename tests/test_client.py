import json
from unittest.mock import MagicMock

import requests

from student_records_api.client import StudentRecordsClient


def make_response(status_code, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://api.test/students"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["content-type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
        response.headers["content-type"] = "text/plain; charset=utf-8"
    return response


def make_client(response=None, side_effect=None):
    session = MagicMock(spec=requests.Session)
    session.request.return_value = response
    session.request.side_effect = side_effect
    return StudentRecordsClient(base_url="http://api.test/", session=session), session


def test_create_student_posts_fields():
    record = {"id": 1, "name": "Ada", "email": "ada@example.com", "createdAt": "2024-01-01T00:00:00.000Z"}
    client, session = make_client(make_response(201, record))

    data, error = client.create_student(name="Ada", email="ada@example.com")

    assert error is None
    assert data == record
    session.request.assert_called_once_with(
        method="POST",
        url="http://api.test/students",
        json={"name": "Ada", "email": "ada@example.com"},
        timeout=15,
    )


def test_update_student_sends_null_to_clear():
    client, session = make_client(make_response(200, {"id": 7}))

    client.update_student(7, age=None)

    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "PATCH"
    assert kwargs["url"] == "http://api.test/students/7"
    assert kwargs["json"] == {"age": None}


def test_validation_errors_are_returned():
    client, _ = make_client(make_response(400, {"errors": ["name is required", "email is required"]}))

    data, error = client.create_student()

    assert data is None
    assert error == {
        "status_code": 400,
        "message": "name is required; email is required",
        "errors": ["name is required", "email is required"],
    }


def test_not_found_message_is_returned():
    client, _ = make_client(make_response(404, {"message": "Student not found"}))

    data, error = client.get_student(5)

    assert data is None
    assert error["status_code"] == 404
    assert error["message"] == "Student not found"
    assert error["errors"] == []


def test_connection_errors_are_returned():
    client, _ = make_client(side_effect=requests.ConnectionError("refused"))

    data, error = client.list_students()

    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_health_returns_banner_text():
    client, _ = make_client(make_response(200, text="Student API (file storage) running"))

    data, error = client.health()

    assert error is None
    assert data == "Student API (file storage) running"


def test_delete_student_returns_confirmation():
    client, session = make_client(make_response(200, {"message": "Student deleted"}))

    data, error = client.delete_student(3)

    assert error is None
    assert data == {"message": "Student deleted"}
    assert session.request.call_args.kwargs["method"] == "DELETE"
