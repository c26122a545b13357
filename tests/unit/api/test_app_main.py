"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Unit tests for gatekeeper/app/main.py lifespan and middleware.
"""

from unittest.mock import AsyncMock, patch

from gatekeeper._version import __version__
from gatekeeper.app.core.policy import AuthMode, SecondaryMode
from gatekeeper.app.main import app


class TestApplication:
    """Tests for the FastAPI application object."""

    def test_metadata(self):
        """The app carries its title and package version."""
        assert app.title == "Gatekeeper DB"
        assert app.version == __version__

    def test_routes_registered(self):
        """Probe and item routes are mounted."""
        paths = set(app.openapi()["paths"])
        assert {"/health", "/ping", "/api/items"} <= paths


class TestLifespan:
    """Tests for the lifespan context."""

    def test_gateway_stored_and_opened_at_startup(self, serve, make_gateway, make_policy):
        """Startup stores the gateway on app.state and attempts a connection."""
        gateway = make_gateway(make_policy())
        with patch.object(gateway, "ensure_ready", AsyncMock(return_value=False)) as mock_ready:
            client = serve(gateway)
            assert client.app.state.gateway is gateway
            mock_ready.assert_awaited()

    def test_gateway_closed_at_shutdown(self, make_gateway, make_policy, make_handle):
        """Leaving the client closes the open handle."""
        from fastapi.testclient import TestClient  # pylint: disable=import-outside-toplevel

        handle = make_handle()
        gateway = make_gateway(make_policy(), handle)
        with (
            patch("gatekeeper.app.main.create_gateway", return_value=gateway),
            patch("gatekeeper.app.database.close_connection", AsyncMock()) as mock_close,
        ):
            with TestClient(app):
                mock_close.assert_not_awaited()
            mock_close.assert_awaited_once_with(handle)
        assert gateway.handle is None

    def test_placeholder_token_warning(self, serve, make_gateway, make_policy, caplog):
        """A placeholder VAULT_TOKEN is reported at startup."""
        policy = make_policy(AuthMode.PREFERRED, SecondaryMode.DISABLED, vault_token="<<replace-me>>")

        serve(make_gateway(policy))

        assert "VAULT_TOKEN looks like a placeholder" in caplog.text
        assert "auth_mode=preferred secondary_mode=disabled" in caplog.text

    def test_startup_survives_failed_connection(self, serve, make_gateway, make_policy, caplog):
        """A failed initial connection is logged and the server still starts."""
        client = serve(make_gateway(make_policy()))

        assert client.get("/ping").status_code == 200
        assert "DB init failed" in caplog.text


class TestCors:
    """Tests for CORS middleware."""

    def test_allows_any_origin_by_default(self, serve, make_gateway, make_policy):
        """The default CORS_ORIGINS of * allows any origin."""
        client = serve(make_gateway(make_policy()))

        response = client.get("/ping", headers={"Origin": "http://example.com"})

        assert response.headers["access-control-allow-origin"] == "*"
