import pytest
from fastapi.testclient import TestClient

from student_records_api.app.core.config import Settings
from student_records_api.app.core.storage import JsonStudentStore
from student_records_api.app.main import create_app
from student_records_api.app.services.student_service import StudentService


@pytest.fixture
def data_path(tmp_path):
    """Location of a fresh, not yet existing data file."""
    return tmp_path / "data.json"


@pytest.fixture
def store(data_path):
    return JsonStudentStore(data_path)


@pytest.fixture
def service(store):
    return StudentService(store)


@pytest.fixture
def client(data_path):
    """HTTP client for an app whose store points at ``data_path``."""
    app = create_app(Settings(data_file=str(data_path)))
    return TestClient(app)


@pytest.fixture
def ada(service):
    """A stored student with every field set."""
    return service.create_student(
        {"name": "Ada Lovelace", "email": "ada@example.com", "age": 36, "grade": "A"}
    )
