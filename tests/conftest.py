"""Shared fixtures.

Every test gets its own in-memory ``mongomock`` database, so no MongoDB
server is required.
"""

import json
import uuid

import mongomock
import pytest
from fastapi.testclient import TestClient

from warehouse_api.app.core.config import Settings
from warehouse_api.app.core.db import ProductStore
from warehouse_api.app.main import create_app

SAMPLE_PRODUCTS = [
    {"name": "Coffee", "price": 25.0, "description": "Ground coffee", "quantity": 10, "unit": "pcs"},
    {"name": "Apples", "price": 3.5, "description": "Red apples", "quantity": 100, "unit": "kg"},
    {"name": "Butter", "price": 12.0, "description": "Salted butter", "quantity": 0, "unit": "pcs"},
    {"name": "Dates", "price": 18.0, "description": "Dried dates", "quantity": 40, "unit": "kg"},
]


@pytest.fixture
def database():
    """A fresh mongomock database."""
    return mongomock.MongoClient()[f"warehouse_test_{uuid.uuid4().hex[:8]}"]


@pytest.fixture
def store(database):
    """An empty product store with indexes in place."""
    product_store = ProductStore.from_database(database)
    product_store.ensure_indexes()
    return product_store


@pytest.fixture
def populated_store(store):
    """Store holding ``SAMPLE_PRODUCTS`` with ids 1..4 in list order."""
    for index, product in enumerate(SAMPLE_PRODUCTS):
        store.insert(dict(product, id=index + 1))
    store.advance_id_counter(len(SAMPLE_PRODUCTS))
    return store


@pytest.fixture
def seed_file(tmp_path):
    """Write ``SAMPLE_PRODUCTS`` to a temporary seed file."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps(SAMPLE_PRODUCTS), encoding="utf-8")
    return str(path)


def _make_client(store, **settings_overrides) -> TestClient:
    """Build a test client over ``store``.

    Startup hooks only run when the client is used as a context manager.
    """
    overrides = {"seed_on_startup": False}
    overrides.update(settings_overrides)
    app = create_app(store=store, app_settings=Settings(**overrides))
    return TestClient(app)


@pytest.fixture
def client(store):
    return _make_client(store)


@pytest.fixture
def populated_client(populated_store):
    return _make_client(populated_store)


@pytest.fixture
def client_factory():
    """Build clients with custom settings, e.g. to exercise startup seeding."""
    return _make_client
