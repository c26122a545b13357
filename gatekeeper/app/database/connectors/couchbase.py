"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

import anyio
from couchbase.auth import PasswordAuthenticator
from couchbase.cluster import Cluster
from couchbase.exceptions import CouchbaseException
from couchbase.options import ClusterOptions, ClusterTimeoutOptions, QueryOptions

from .base import Connector, Item

LOGGER = logging.getLogger(__name__)


@dataclass
class CouchbaseSession:
    """Cluster connection and the bucket queried for items."""

    cluster: Cluster
    bucket: str


class CouchbaseConnector(Connector):
    """Couchbase via the Python SDK, run in worker threads.

    There is no numeric port; the configured database name is the bucket.
    """

    default_port = None
    errors = (CouchbaseException,)

    async def connect(self, target, credentials) -> CouchbaseSession:
        scheme = "couchbases" if target.tls else "couchbase"
        LOGGER.info("Connecting to couchbase host=%s bucket=%s", target.host, target.database)
        timeout = timedelta(seconds=target.connect_timeout)

        def _connect() -> CouchbaseSession:
            options = ClusterOptions(
                PasswordAuthenticator(credentials.username, credentials.password),
                timeout_options=ClusterTimeoutOptions(connect_timeout=timeout, bootstrap_timeout=timeout),
            )
            cluster = Cluster(f"{scheme}://{target.host}", options)
            try:
                cluster.wait_until_ready(timeout)
                cluster.bucket(target.database)
            except CouchbaseException:
                cluster.close()
                raise
            return CouchbaseSession(cluster=cluster, bucket=target.database)

        return await anyio.to_thread.run_sync(_connect)

    async def list_items(self, connection: CouchbaseSession, limit: int) -> list[Item]:
        # Requires a primary index on the bucket
        statement = f"SELECT META(b).id AS id, b.* FROM `{connection.bucket}` AS b LIMIT $limit"

        def _query() -> list[Item]:
            result = connection.cluster.query(statement, QueryOptions(named_parameters={"limit": limit}))
            return list(result.rows())

        return await anyio.to_thread.run_sync(_query)

    async def close(self, connection: CouchbaseSession) -> None:
        await anyio.to_thread.run_sync(connection.cluster.close)
