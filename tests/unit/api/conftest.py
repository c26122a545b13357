"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Pytest fixtures for gatekeeper/app/api unit tests.

Note: Shared fixtures (make_policy, make_handle, etc.) are automatically
available via pytest_plugins in tests/conftest.py.
"""

# pylint: disable=redefined-outer-name

from contextlib import ExitStack
from typing import Optional
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from gatekeeper.app.core.policy import PolicyConfig
from gatekeeper.app.database import ConnectionHandle, ConnectionSettings, DatabaseGateway


@pytest.fixture
def make_gateway():
    """Factory fixture for a DatabaseGateway, optionally pre-seeded with a handle.

    Without a handle the gateway has no DB_TYPE, so every open attempt fails
    locally without touching the network.
    """

    def _make_gateway(policy: PolicyConfig, handle: Optional[ConnectionHandle] = None) -> DatabaseGateway:
        gateway = DatabaseGateway(policy, ConnectionSettings())
        gateway._handle = handle  # pylint: disable=protected-access
        return gateway

    return _make_gateway


@pytest.fixture
def serve():
    """Start the application around a given gateway and yield a TestClient."""

    stack = ExitStack()

    def _serve(gateway: DatabaseGateway) -> TestClient:
        stack.enter_context(patch("gatekeeper.app.main.create_gateway", return_value=gateway))
        stack.enter_context(patch("gatekeeper.app.database.close_connection", AsyncMock()))
        from gatekeeper.app.main import app  # pylint: disable=import-outside-toplevel

        return stack.enter_context(TestClient(app))

    yield _serve
    stack.close()
