import pytest

from app import create_app
from observability.metrics import reset


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def app(tmp_path, upload_dir):
    reset()
    return create_app({
        "TESTING": True,
        "UPLOAD_DIR": str(upload_dir),
        "LOG_DIR": str(tmp_path / "logs"),
    })


@pytest.fixture
def client(app):
    return app.test_client()
