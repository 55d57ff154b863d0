"""Shared fixtures for the café API tests."""

import pytest
from fastapi.testclient import TestClient

from cafe_api.api.app import create_app
from cafe_api.repositories import InMemoryCafeRepository
from cafe_api.services import CafeService


@pytest.fixture
def repository():
    """Repository with the built-in dataset."""
    return InMemoryCafeRepository.create()


@pytest.fixture
def service(repository):
    """Case-sensitive café service."""
    return CafeService(repository=repository, case_sensitive=True)


@pytest.fixture
def client(repository):
    """Create a test client with the lifespan running."""
    with TestClient(create_app(repository=repository)) as test_client:
        yield test_client
