"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.
"""

import logging

import psycopg
from psycopg.rows import dict_row

from .base import Connector, Item

LOGGER = logging.getLogger(__name__)

LIST_SQL = "SELECT id, idx, title FROM messages ORDER BY id LIMIT %s"


class PostgresConnector(Connector):
    """PostgreSQL via psycopg's async connection."""

    default_port = 5432
    errors = (psycopg.Error,)

    async def connect(self, target, credentials) -> psycopg.AsyncConnection:
        LOGGER.info("Connecting to postgres host=%s port=%s db=%s", target.host, target.port, target.database)
        return await psycopg.AsyncConnection.connect(
            host=target.host,
            port=target.port,
            dbname=target.database,
            user=credentials.username,
            password=credentials.password,
            sslmode="require" if target.tls else "prefer",
            connect_timeout=max(1, int(target.connect_timeout)),
            autocommit=True,
            row_factory=dict_row,
        )

    async def list_items(self, connection: psycopg.AsyncConnection, limit: int) -> list[Item]:
        async with connection.cursor() as cursor:
            await cursor.execute(LIST_SQL, (limit,))
            return await cursor.fetchall()

    async def close(self, connection: psycopg.AsyncConnection) -> None:
        await connection.close()
