"""
Test configuration and fixtures
"""

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_todo_repository
from app.main import app
from app.repositories.memory_repository import InMemoryTodoRepository


@pytest.fixture
def repository():
    """Create a fresh in-memory repository for each test"""
    return InMemoryTodoRepository()


@pytest.fixture
def url_prefix():
    """URL prefix used when creating todos directly on the repository"""
    return "http://test/todos/"


@pytest.fixture(scope="function")
def client(repository):
    """Create a test client backed by the per-test repository"""
    app.dependency_overrides[get_todo_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
