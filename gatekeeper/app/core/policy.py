"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Credential trust policy: mode enums and the immutable policy snapshot.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

PLACEHOLDER_TOKEN_PREFIX = "<<"
PLACEHOLDER_TOKEN_VALUE = "changeme"


class AuthMode(str, Enum):
    """Which credential sources are acceptable at all."""

    REQUIRED = "required"
    PREFERRED = "preferred"
    ENV_ONLY = "env_only"


class SecondaryMode(str, Enum):
    """Whether static credentials may back up a failed secret-store read."""

    DISABLED = "disabled"
    ENV_FALLBACK = "env_fallback"


class AuthSource(str, Enum):
    """Trust tier that produced the active credentials."""

    VAULT_KV = "vault-kv"
    VAULT_DYNAMIC = "vault-dynamic"
    ENV = "env"

    @property
    def is_vault(self) -> bool:
        """True for either secret-store tier."""

        return self.value.startswith("vault")


def looks_like_real_token(token: Optional[str]) -> bool:
    """Reject empty, ``<<placeholder>>`` and ``changeme`` tokens.

    This guards against shipping demo values; it is not an access control.
    """

    if not token:
        return False
    if token.startswith(PLACEHOLDER_TOKEN_PREFIX) or token.lower() == PLACEHOLDER_TOKEN_VALUE:
        return False
    return True


@dataclass(frozen=True)
class PolicyConfig:
    """Process-wide credential policy, read once at startup."""

    auth_mode: AuthMode = AuthMode.PREFERRED
    secondary_mode: SecondaryMode = SecondaryMode.DISABLED
    vault_addr: Optional[str] = None
    vault_token: Optional[str] = None
    secret_path: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    vault_timeout: float = 10.0

    def has_static_credentials(self) -> bool:
        """Return True when both DB_USERNAME and DB_PASSWORD are populated."""

        return bool(self.username and self.password)

    def store_configured(self) -> bool:
        """Return True when the secret store can be consulted."""

        return bool(self.vault_addr and self.secret_path and looks_like_real_token(self.vault_token))
