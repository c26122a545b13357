"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Backend connectors, one per supported ``Backend``.
"""

from typing import assert_never

from gatekeeper.app.database.config import Backend

from .base import Connector, Item
from .couchbase import CouchbaseConnector
from .mongodb import MongoConnector
from .mysql import MySQLConnector
from .postgres import PostgresConnector

_MYSQL = MySQLConnector()
_POSTGRES = PostgresConnector()
_MONGODB = MongoConnector()
_COUCHBASE = CouchbaseConnector()


def get_connector(backend: Backend) -> Connector:
    """Return the connector for ``backend``."""

    match backend:
        case Backend.MYSQL:
            return _MYSQL
        case Backend.POSTGRES:
            return _POSTGRES
        case Backend.MONGODB:
            return _MONGODB
        case Backend.COUCHBASE:
            return _COUCHBASE
        case _:
            assert_never(backend)


__all__ = [
    "Connector",
    "CouchbaseConnector",
    "Item",
    "MongoConnector",
    "MySQLConnector",
    "PostgresConnector",
    "get_connector",
]
