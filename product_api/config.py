"""Environment configuration for the product service.

Values come from the process environment, with a local .env file loaded
first through python-dotenv. PORT and MONGODB_URI are required; everything
else has a default.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from product_api.exceptions import ConfigurationError

DEFAULT_DB_NAME = "products"
DEFAULT_TIMEOUT_MS = 5000

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _get_required_env(key: str) -> str:
    value = os.getenv(key)
    if not value:
        raise ConfigurationError(
            f"Required environment variable '{key}' is not set. "
            f"Please add it to your .env file."
        )
    return value


def _parse_int(key: str, value: str, minimum: int, maximum: Optional[int] = None) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ConfigurationError(f"'{key}' must be an integer, got {value!r}")
    if number < minimum or (maximum is not None and number > maximum):
        raise ConfigurationError(f"'{key}' is out of range: {number}")
    return number


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"'{key}' must be a boolean, got {value!r}")


def db_name_from_uri(uri: str) -> Optional[str]:
    """Return the database named in the path of a MongoDB URI, if any."""
    path = urlparse(uri).path.lstrip("/")
    return path or None


@dataclass
class Settings:
    port: int
    mongodb_uri: str
    db_name: str = DEFAULT_DB_NAME
    db_tls: bool = False
    db_timeout_ms: int = DEFAULT_TIMEOUT_MS
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        port = _parse_int("PORT", _get_required_env("PORT"), 1, 65535)
        mongodb_uri = _get_required_env("MONGODB_URI")

        # mongoengine gives a database in the URI path precedence over DB_NAME
        db_name = db_name_from_uri(mongodb_uri) or os.getenv("DB_NAME") or DEFAULT_DB_NAME

        tls_env = os.getenv("DB_TLS")
        if tls_env:
            db_tls = _parse_bool("DB_TLS", tls_env)
        else:
            db_tls = mongodb_uri.startswith("mongodb+srv://")

        timeout_env = os.getenv("DB_TIMEOUT_MS")
        db_timeout_ms = (
            _parse_int("DB_TIMEOUT_MS", timeout_env, 1) if timeout_env else DEFAULT_TIMEOUT_MS
        )

        origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

        return cls(
            port=port,
            mongodb_uri=mongodb_uri,
            db_name=db_name,
            db_tls=db_tls,
            db_timeout_ms=db_timeout_ms,
            cors_origins=origins or ["*"],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
