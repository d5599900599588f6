import pytest
from fastapi.testclient import TestClient

from app.storage.repository import InMemoryRepository
from main import create_app


@pytest.fixture
def repository():
    return InMemoryRepository.with_seed_data()


@pytest.fixture
def client(repository):
    app = create_app(repository=repository)
    with TestClient(app) as test_client:
        yield test_client
