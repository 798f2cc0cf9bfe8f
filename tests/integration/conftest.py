"""
Integration test fixtures
"""

import pytest
from fastapi.testclient import TestClient

from catalog_search.api.dependencies import get_search_backend
from catalog_search.api.main import create_app


@pytest.fixture
def app(memory_backend):
    """API wired to the in-memory backend."""
    app = create_app()
    app.dependency_overrides[get_search_backend] = lambda: memory_backend
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
