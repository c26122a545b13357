"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.
"""

import logging

import anyio
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .base import Connector, Item

LOGGER = logging.getLogger(__name__)

COLLECTION = "items"
AUTH_DATABASE = "admin"


def _to_item(document: dict) -> Item:
    item = dict(document)
    if "_id" in item:
        item["_id"] = str(item["_id"])
        item.setdefault("id", item["_id"])
    return item


class MongoConnector(Connector):
    """MongoDB via pymongo, run in worker threads."""

    default_port = 27017
    errors = (PyMongoError,)

    async def connect(self, target, credentials) -> Database:
        LOGGER.info("Connecting to mongodb host=%s port=%s db=%s", target.host, target.port, target.database)
        timeout_ms = int(target.connect_timeout * 1000)

        def _connect() -> Database:
            client = MongoClient(
                host=target.host,
                port=target.port,
                username=credentials.username,
                password=credentials.password,
                authSource=AUTH_DATABASE,
                tls=target.tls,
                serverSelectionTimeoutMS=timeout_ms,
                connectTimeoutMS=timeout_ms,
            )
            try:
                # MongoClient connects lazily; ping forces authentication now
                client.admin.command("ping")
            except PyMongoError:
                client.close()
                raise
            return client[target.database]

        return await anyio.to_thread.run_sync(_connect)

    async def list_items(self, connection: Database, limit: int) -> list[Item]:
        def _query() -> list[Item]:
            return [_to_item(doc) for doc in connection[COLLECTION].find({}).limit(limit)]

        return await anyio.to_thread.run_sync(_query)

    async def close(self, connection: Database) -> None:
        await anyio.to_thread.run_sync(connection.client.close)
