"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Database connection configuration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gatekeeper.app.core.config import settings
from gatekeeper.app.core.errors import UnsupportedBackendError

DEFAULT_DATABASE = "workshop"


class Backend(str, Enum):
    """Supported storage backends."""

    MYSQL = "mysql"
    POSTGRES = "postgres"
    MONGODB = "mongodb"
    COUCHBASE = "couchbase"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Backend":
        """Return the backend for ``value`` or raise ``UnsupportedBackendError``."""

        try:
            return cls(value)
        except ValueError as exc:
            raise UnsupportedBackendError(value, tuple(member.value for member in cls)) from exc


@dataclass(frozen=True)
class ConnectionSettings:
    """Raw connection settings as configured; validated by the gateway."""

    backend_type: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    database: Optional[str] = None
    tls: bool = False
    connect_timeout: float = 10.0


@dataclass(frozen=True)
class ConnectionTarget:
    """Validated connection target with per-backend defaults applied.

    For couchbase ``port`` is ``None`` and ``database`` names the bucket.
    """

    backend: Backend
    host: str
    port: Optional[int]
    database: str
    tls: bool = False
    connect_timeout: float = 10.0


def get_connection_settings() -> ConnectionSettings:
    """Return the connection settings populated from environment variables."""

    return ConnectionSettings(
        backend_type=settings.db_type,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
        tls=settings.db_tls,
        connect_timeout=settings.db_connect_timeout,
    )
