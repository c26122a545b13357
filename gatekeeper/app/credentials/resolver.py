"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Trust-tier credential resolution.

The secret store is always tried first. Static DB_USERNAME/DB_PASSWORD are a
last resort: never used in ``required`` mode, and only used in ``preferred``
mode when DB_SECONDARY_MODE=env_fallback.
"""

import logging

from gatekeeper.app.core.errors import (
    AuthExhaustedError,
    MissingSecretFieldsError,
    MissingStaticCredentialsError,
    StoreUnavailableError,
    VaultCredentialsUnavailableError,
)
from gatekeeper.app.core.policy import AuthMode, AuthSource, PolicyConfig, SecondaryMode
from gatekeeper.app.credentials.models import CredentialTriple
from gatekeeper.app.vault import SecretRecord, normalize_secret_path, read_secret

LOGGER = logging.getLogger(__name__)

USERNAME_KEYS = ("username", "user")
PASSWORD_KEYS = ("password", "pass")


def _first_present(record: SecretRecord, keys: tuple[str, ...]):
    for key in keys:
        value = record.get(key)
        if value:
            return value
    return None


def extract_credentials(record: SecretRecord) -> tuple[str, str]:
    """Return ``(username, password)`` from a secret record.

    Raises:
        MissingSecretFieldsError: either field is absent under both aliases.
    """

    username = _first_present(record, USERNAME_KEYS)
    password = _first_present(record, PASSWORD_KEYS)
    if not username or not password:
        raise MissingSecretFieldsError("secret is missing username/password")
    return str(username), str(password)


def _static_triple(policy: PolicyConfig) -> CredentialTriple:
    return CredentialTriple(username=policy.username, password=policy.password, auth_source=AuthSource.ENV)


async def _from_store(policy: PolicyConfig) -> CredentialTriple:
    record = await read_secret(
        policy.vault_addr,
        policy.vault_token,
        policy.secret_path,
        timeout=policy.vault_timeout,
    )
    username, password = extract_credentials(record)
    is_dynamic = normalize_secret_path(policy.secret_path).is_dynamic
    source = AuthSource.VAULT_DYNAMIC if is_dynamic else AuthSource.VAULT_KV
    return CredentialTriple(username=username, password=password, auth_source=source)


async def resolve_credentials(policy: PolicyConfig) -> CredentialTriple:
    """Produce a complete credential triple or raise an ``AuthError``."""

    if policy.auth_mode is AuthMode.ENV_ONLY:
        if not policy.has_static_credentials():
            raise MissingStaticCredentialsError("Auth(env_only): DB_USERNAME/DB_PASSWORD missing")
        return _static_triple(policy)

    if policy.store_configured():
        try:
            triple = await _from_store(policy)
            LOGGER.info("Using %s credentials from %s", triple.auth_source.value, policy.secret_path)
            return triple
        except MissingSecretFieldsError:
            LOGGER.warning("Vault secret at %s missing username/password", policy.secret_path)
        except StoreUnavailableError as exc:
            LOGGER.warning("Vault read failed (%s): %s", exc.status_code or "error", exc)
    else:
        LOGGER.warning("Vault not fully configured (addr/token/path).")

    if policy.auth_mode is AuthMode.REQUIRED:
        raise VaultCredentialsUnavailableError("Auth(required): Vault credentials unavailable")

    if policy.secondary_mode is SecondaryMode.ENV_FALLBACK:
        if policy.has_static_credentials():
            LOGGER.warning("Falling back to env credentials (preferred + env_fallback).")
            return _static_triple(policy)
        raise AuthExhaustedError(
            "Auth(preferred): Vault failed and no env fallback available", fallback_enabled=True
        )

    raise AuthExhaustedError("Auth(preferred): Vault failed and secondary=disabled", fallback_enabled=False)
