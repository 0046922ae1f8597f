import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from db import Store  # noqa: E402


@pytest.fixture
def store(tmp_path):
    store = Store(f"sqlite:///{tmp_path / 'library.db'}", echo=False)
    store.init_db()
    yield store
    store.dispose()


@pytest.fixture
def session(store):
    with store.session() as session:
        yield session


@pytest.fixture
def client(store):
    from api.main import create_app

    return TestClient(create_app(store))
