import pytest
from fastapi.testclient import TestClient

from student_api.core.config import Settings
from student_api.core.database import StudentStorage
from student_api.main import create_app


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'student.db'}"


@pytest.fixture
def storage(database_url):
    svc = StudentStorage(database_url)
    svc.open()
    yield svc
    svc.close()


@pytest.fixture
def db(storage):
    session = storage.session()
    yield session
    session.close()


def _make_client(database_url, seed):
    app = create_app(Settings(DATABASE_URL=database_url, SEED_ON_STARTUP=seed))
    return TestClient(app)


@pytest.fixture
def make_client():
    return _make_client


@pytest.fixture
def client(database_url):
    """Client against an empty database."""
    with _make_client(database_url, seed=False) as c:
        yield c


@pytest.fixture
def seeded_client(database_url):
    """Client against a database holding the three sample students."""
    with _make_client(database_url, seed=True) as c:
        yield c
