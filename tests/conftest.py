"""Shared fixtures: an in-memory MongoDB and an API client wired to it."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from product_api.app import create_app
from product_api.config import Settings
from product_api.database import Database
from product_api.models import Product
from product_api.store import ProductStore


@pytest.fixture
def settings():
    return Settings(port=4000, mongodb_uri="mongodb://localhost:27017", db_name="product_api_test")


@pytest.fixture
def database(settings):
    """Connected mongomock-backed database, emptied before each test."""
    db = Database(
        uri=settings.mongodb_uri,
        name=settings.db_name,
        mongo_client_class=mongomock.MongoClient,
    )
    db.connect()
    Product.drop_collection()
    yield db
    db.close()


@pytest.fixture
def store(database):
    return ProductStore(database)


@pytest.fixture
def app(settings, database):
    return create_app(settings, database=database)


@pytest.fixture
def client(app, database):
    with TestClient(app) as test_client:
        yield test_client
