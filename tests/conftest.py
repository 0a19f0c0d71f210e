"""Shared fixtures: an isolated app and in-memory store per test."""

import pytest
from fastapi.testclient import TestClient

from service_catalog_api.app.core.config import BASE_PATH, Settings
from service_catalog_api.app.main import create_app
from service_catalog_api.app.stores import MemoryStore

COLLECTION_URL = f"{BASE_PATH}/serviceSpecification"


@pytest.fixture
def app_settings():
    return Settings(store_backend="memory", seed_test_record=True, log_level="WARNING")


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def client(app_settings, store):
    with TestClient(create_app(app_settings, store=store)) as test_client:
        yield test_client


@pytest.fixture
def create(client):
    def _create(**fields):
        response = client.post(COLLECTION_URL, json=fields)
        assert response.status_code == 201
        return response.json()

    return _create
