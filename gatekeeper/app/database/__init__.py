"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Lazily opened, process-wide database connection.
"""

import asyncio
import logging
from typing import Optional

from gatekeeper.app.core.config import get_policy_config
from gatekeeper.app.core.errors import GatekeeperError
from gatekeeper.app.core.policy import AuthSource, PolicyConfig
from gatekeeper.app.credentials import resolve_credentials

from .config import Backend, ConnectionSettings, ConnectionTarget, get_connection_settings
from .gateway import ConnectionHandle, build_target, close_connection, connect, list_items, open_connection

LOGGER = logging.getLogger(__name__)


class DatabaseGateway:
    """Owns the single connection handle for the application.

    The handle is created on first use and kept until ``close``. Opening is
    single-flight: concurrent callers await the same attempt and see the same
    outcome. A failed attempt is forgotten so a later request can try again.
    """

    def __init__(self, policy: PolicyConfig, connection_settings: ConnectionSettings):
        self.policy = policy
        self.connection_settings = connection_settings
        self._handle: Optional[ConnectionHandle] = None
        self._pending: Optional[asyncio.Task] = None

    @property
    def handle(self) -> Optional[ConnectionHandle]:
        """The open handle, or None when no attempt has succeeded."""

        return self._handle

    @property
    def auth_source(self) -> Optional[AuthSource]:
        """Auth source of the open handle, if any."""

        return self._handle.auth_source if self._handle is not None else None

    async def _open(self) -> Optional[ConnectionHandle]:
        cfg = self.connection_settings
        try:
            target = build_target(
                cfg.backend_type,
                cfg.host,
                cfg.port,
                cfg.database,
                tls=cfg.tls,
                connect_timeout=cfg.connect_timeout,
            )
            credentials = await resolve_credentials(self.policy)
            return await open_connection(target, credentials)
        except GatekeeperError as exc:
            LOGGER.error("DB init failed: %s", exc)
            return None

    async def ensure_ready(self) -> bool:
        """Open the connection if needed; return True when a handle exists."""

        if self._handle is not None:
            return True
        # No await between the check and the assignment, so only one task is started
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._open())
        pending = self._pending
        try:
            handle = await asyncio.shield(pending)
        finally:
            if self._pending is pending and pending.done():
                self._pending = None
        if handle is not None and self._handle is None:
            self._handle = handle
        return self._handle is not None

    async def close(self) -> None:
        """Close the handle at shutdown."""

        if self._pending is not None:
            handle = await self._pending
            self._pending = None
            if self._handle is None:
                self._handle = handle
        await close_connection(self._handle)
        self._handle = None


def create_gateway() -> DatabaseGateway:
    """Build a gateway from the process settings."""

    return DatabaseGateway(get_policy_config(), get_connection_settings())


__all__ = [
    "Backend",
    "ConnectionHandle",
    "ConnectionSettings",
    "ConnectionTarget",
    "DatabaseGateway",
    "build_target",
    "close_connection",
    "connect",
    "create_gateway",
    "list_items",
    "open_connection",
]
