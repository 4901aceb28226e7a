import mongomock
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from product_api.app import create_app
from product_api.config import Settings
from product_api.database import Database
from product_api.exceptions import DatabaseConnectionError, StoreError


class UnreachableClient(mongomock.MongoClient):
    def server_info(self):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")


def test_connect_and_close():
    db = Database("mongodb://localhost", "product_api_test", mongo_client_class=mongomock.MongoClient)

    client = db.connect()

    assert db.is_connected
    assert db.connect() is client
    db.close()
    assert not db.is_connected
    db.close()


def test_unreachable_server_is_fatal():
    db = Database("mongodb://localhost", "product_api_test", mongo_client_class=UnreachableClient)

    with pytest.raises(DatabaseConnectionError) as excinfo:
        db.connect()

    assert isinstance(excinfo.value, StoreError)
    assert not db.is_connected


def test_from_settings():
    settings = Settings(
        port=4000,
        mongodb_uri="mongodb+srv://cluster0.example.net/shop",
        db_name="shop",
        db_tls=True,
        db_timeout_ms=1000,
    )

    db = Database.from_settings(settings)

    assert db.uri == settings.mongodb_uri
    assert db.name == "shop"
    assert db.tls is True
    assert db.timeout_ms == 1000
    assert not db.is_connected


def test_app_does_not_start_without_database(settings):
    db = Database(settings.mongodb_uri, settings.db_name, mongo_client_class=UnreachableClient)
    app = create_app(settings, database=db)

    with pytest.raises(DatabaseConnectionError):
        with TestClient(app):
            pass

    assert not db.is_connected
