import logging

import certifi
from mongoengine import connect, disconnect
from mongoengine.connection import ConnectionFailure
from pymongo.errors import PyMongoError

from product_api.config import Settings
from product_api.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


class Database:
    """Handle on the MongoDB connection shared by every request.

    Opened once at application startup and closed at shutdown. Documents
    bound to ``alias`` (the mongoengine default) use this connection.
    """

    def __init__(
        self,
        uri: str,
        name: str,
        alias: str = "default",
        tls: bool = False,
        timeout_ms: int = 5000,
        mongo_client_class=None,
    ):
        self.uri = uri
        self.name = name
        self.alias = alias
        self.tls = tls
        self.timeout_ms = timeout_ms
        self.mongo_client_class = mongo_client_class
        self.client = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            uri=settings.mongodb_uri,
            name=settings.db_name,
            tls=settings.db_tls,
            timeout_ms=settings.db_timeout_ms,
        )

    @property
    def is_connected(self) -> bool:
        return self.client is not None

    def connect(self):
        """Connect and make sure the server answers.

        Raises DatabaseConnectionError when the server cannot be reached.
        """
        if self.client is not None:
            return self.client

        options = {"serverSelectionTimeoutMS": self.timeout_ms}
        if self.tls:
            options["tlsCAFile"] = certifi.where()
        if self.mongo_client_class is not None:
            options["mongo_client_class"] = self.mongo_client_class

        logger.info("Connecting to database %r", self.name)
        try:
            client = connect(db=self.name, host=self.uri, alias=self.alias, **options)
            client.server_info()
        except (PyMongoError, ConnectionFailure) as e:
            disconnect(alias=self.alias)
            raise DatabaseConnectionError(f"Could not connect to database {self.name!r}") from e

        self.client = client
        logger.info("Connected to database %r", self.name)
        return client

    def close(self) -> None:
        if self.client is None:
            return
        disconnect(alias=self.alias)
        self.client = None
        logger.info("Closed connection to database %r", self.name)
