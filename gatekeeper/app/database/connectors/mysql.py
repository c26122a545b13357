"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.
"""

import logging
import ssl
from dataclasses import dataclass, field

import anyio
import pymysql
from pymysql.cursors import DictCursor

from .base import Connector, Item

LOGGER = logging.getLogger(__name__)

LIST_SQL = "SELECT id, idx, title FROM messages ORDER BY id LIMIT %s"


@dataclass
class MySQLSession:
    """A blocking PyMySQL connection plus the lock serialising its use."""

    connection: pymysql.connections.Connection
    lock: anyio.Lock = field(default_factory=anyio.Lock, repr=False)


class MySQLConnector(Connector):
    """MySQL via PyMySQL, run in worker threads."""

    default_port = 3306
    errors = (pymysql.MySQLError,)

    async def connect(self, target, credentials) -> MySQLSession:
        LOGGER.info("Connecting to mysql host=%s port=%s db=%s", target.host, target.port, target.database)

        def _connect() -> pymysql.connections.Connection:
            return pymysql.connect(
                host=target.host,
                port=target.port,
                user=credentials.username,
                password=credentials.password,
                database=target.database,
                connect_timeout=target.connect_timeout,
                cursorclass=DictCursor,
                ssl=ssl.create_default_context() if target.tls else None,
                autocommit=True,
            )

        return MySQLSession(connection=await anyio.to_thread.run_sync(_connect))

    async def list_items(self, connection: MySQLSession, limit: int) -> list[Item]:
        def _query() -> list[Item]:
            with connection.connection.cursor() as cursor:
                cursor.execute(LIST_SQL, (limit,))
                return list(cursor.fetchall())

        async with connection.lock:
            return await anyio.to_thread.run_sync(_query)

    async def close(self, connection: MySQLSession) -> None:
        async with connection.lock:
            await anyio.to_thread.run_sync(connection.connection.close)
