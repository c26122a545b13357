"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Backend dispatch producing connection handles tagged with their auth source.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from gatekeeper.app.core.errors import ConfigurationError, ConnectionFailedError, QueryFailedError
from gatekeeper.app.core.policy import AuthSource
from gatekeeper.app.credentials import CredentialTriple
from gatekeeper.app.database.config import DEFAULT_DATABASE, Backend, ConnectionTarget
from gatekeeper.app.database.connectors import Item, get_connector

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectionHandle:
    """An open backend connection and the trust tier that authenticated it."""

    driver: Backend
    underlying: Any = field(repr=False)
    auth_source: AuthSource


def build_target(
    backend_type: Optional[str],
    host: Optional[str],
    port: Optional[int] = None,
    database: Optional[str] = None,
    *,
    tls: bool = False,
    connect_timeout: float = 10.0,
) -> ConnectionTarget:
    """Validate raw settings and apply per-backend defaults. Performs no I/O."""

    backend = Backend.parse(backend_type)
    if not host:
        raise ConfigurationError("DB_HOST is required")
    default_port = get_connector(backend).default_port
    if default_port is None:
        port = None
    elif port is None:
        port = default_port
    return ConnectionTarget(
        backend=backend,
        host=host,
        port=port,
        database=database or DEFAULT_DATABASE,
        tls=tls,
        connect_timeout=connect_timeout,
    )


async def open_connection(target: ConnectionTarget, credentials: CredentialTriple) -> ConnectionHandle:
    """Connect to ``target`` and tag the handle with the credentials' auth source."""

    connector = get_connector(target.backend)
    try:
        underlying = await connector.connect(target, credentials)
    except connector.errors + (OSError,) as exc:
        raise ConnectionFailedError(target.backend.value, exc) from exc
    LOGGER.info("Connected to %s using %s credentials", target.backend.value, credentials.auth_source.value)
    return ConnectionHandle(driver=target.backend, underlying=underlying, auth_source=credentials.auth_source)


async def connect(
    backend_type: Optional[str],
    host: Optional[str],
    port: Optional[int],
    database: Optional[str],
    credentials: CredentialTriple,
    *,
    tls: bool = False,
    connect_timeout: float = 10.0,
) -> ConnectionHandle:
    """Validate the target, then open a connection with ``credentials``."""

    target = build_target(backend_type, host, port, database, tls=tls, connect_timeout=connect_timeout)
    return await open_connection(target, credentials)


async def list_items(handle: ConnectionHandle, limit: int) -> list[Item]:
    """List up to ``limit`` items through the handle's connector."""

    connector = get_connector(handle.driver)
    try:
        return await connector.list_items(handle.underlying, limit)
    except connector.errors + (OSError,) as exc:
        raise QueryFailedError(handle.driver.value, exc) from exc


async def close_connection(handle: Optional[ConnectionHandle]) -> None:
    """Close a handle if it is not None, logging driver errors."""

    if handle is None:
        return
    connector = get_connector(handle.driver)
    try:
        await connector.close(handle.underlying)
    except connector.errors + (OSError,) as exc:
        LOGGER.warning("Error closing %s connection: %s", handle.driver.value, exc)
