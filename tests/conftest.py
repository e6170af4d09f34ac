import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import create_app
from app.services.student.store import StudentStore
from app.services.student.student import StudentService


@pytest.fixture
def store():
    return StudentStore()


@pytest.fixture
def service(store):
    return StudentService(store)


@pytest.fixture
def static_root(tmp_path):
    """A small static site: index, a stylesheet and an empty sub directory."""
    root = tmp_path / "web"
    (root / "css").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "index.html").write_text("<h1>Alunos</h1>", encoding="utf-8")
    (root / "css" / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    return root


@pytest.fixture
def app(service, static_root):
    config = settings.model_copy(update={"STATIC_DIR": str(static_root)})
    return create_app(service, config)


@pytest.fixture
def client(app):
    """Create a FastAPI test client around a fresh store."""
    return TestClient(app)


@pytest.fixture
def sample_student():
    """A valid student payload."""
    return {"name": "Ana", "age": 20, "email": "a@x.com", "course": "CS"}
