import pytest
from fastapi.testclient import TestClient

from fileserver.deps import get_chunk_size, get_retriever
from fileserver.main import app
from fileserver.services.retriever import FileRetriever


@pytest.fixture
def base_dir(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    return root


@pytest.fixture
def retriever(base_dir):
    return FileRetriever(str(base_dir))


@pytest.fixture
def client(retriever):
    # Small chunks so multi-chunk bodies stay small in tests
    app.dependency_overrides[get_retriever] = lambda: retriever
    app.dependency_overrides[get_chunk_size] = lambda: 16
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
