"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Unit tests for gatekeeper/app/core/policy.py
"""

import dataclasses

import pytest

from gatekeeper.app.core.policy import AuthSource, PolicyConfig, looks_like_real_token


class TestLooksLikeRealToken:
    """Tests for the placeholder token heuristic."""

    @pytest.mark.parametrize("token", [None, "", "<<VAULT_TOKEN>>", "<<", "changeme", "CHANGEME", "ChangeMe"])
    def test_rejects_placeholders(self, token):
        """Empty, bracketed and changeme tokens are not real."""
        assert looks_like_real_token(token) is False

    @pytest.mark.parametrize("token", ["hvs.CAESIabc", "root", "changeme2", "x<<y"])
    def test_accepts_other_tokens(self, token):
        """Anything else passes."""
        assert looks_like_real_token(token) is True


class TestAuthSource:
    """Tests for AuthSource.is_vault."""

    def test_vault_sources(self):
        """Both secret-store tiers are vault-derived."""
        assert AuthSource.VAULT_KV.is_vault
        assert AuthSource.VAULT_DYNAMIC.is_vault

    def test_env_source(self):
        """Static credentials are not vault-derived."""
        assert not AuthSource.ENV.is_vault

    def test_values(self):
        """Wire values match the health endpoint channel strings."""
        assert [s.value for s in AuthSource] == ["vault-kv", "vault-dynamic", "env"]


class TestPolicyConfig:
    """Tests for PolicyConfig helpers."""

    def test_store_configured(self, make_policy):
        """Address, path and a real token make the store usable."""
        assert make_policy().store_configured()

    @pytest.mark.parametrize(
        "override",
        [{"vault_addr": None}, {"secret_path": ""}, {"vault_token": None}, {"vault_token": "changeme"}],
    )
    def test_store_not_configured(self, make_policy, override):
        """Any missing piece or a placeholder token disables the store."""
        assert not make_policy(**override).store_configured()

    def test_static_credentials(self, make_policy):
        """Both username and password are needed."""
        assert make_policy().has_static_credentials()
        assert not make_policy(password=None).has_static_credentials()
        assert not make_policy(username="").has_static_credentials()

    def test_frozen(self):
        """The policy snapshot is immutable."""
        policy = PolicyConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            policy.username = "someone"  # type: ignore[misc]
