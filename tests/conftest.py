import os
import sys

import pytest

repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from fastapi.testclient import TestClient

from cookieprobe.config import Settings
from cookieprobe.sessions import SessionStore


@pytest.fixture
def store():
    return SessionStore()


@pytest.fixture
def app(tmp_path):
    from api.main import create_app

    return create_app(Settings(static_dir=tmp_path / "no-static"))


@pytest.fixture
def client(app):
    return TestClient(app)
