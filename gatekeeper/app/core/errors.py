"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Exception taxonomy for credential resolution and database access.
"""

from typing import Optional


class GatekeeperError(Exception):
    """Base class for all credential and connection failures."""


class ConfigurationError(GatekeeperError, ValueError):
    """Required settings are missing or invalid; raised before any I/O."""


class UnsupportedBackendError(ConfigurationError):
    """The configured backend type is not one of the supported drivers."""

    def __init__(self, backend_type: Optional[str], supported: tuple[str, ...]):
        self.backend_type = backend_type
        self.supported = supported
        super().__init__(f"Unsupported DB_TYPE: {backend_type}. Use one of: {', '.join(supported)}")


class StoreUnavailableError(GatekeeperError):
    """The secret store could not be read (transport failure or non-2xx status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class MissingSecretFieldsError(GatekeeperError):
    """The secret was read but carried no usable username/password pair."""


class AuthError(GatekeeperError):
    """No credential source remains for the active policy."""


class MissingStaticCredentialsError(AuthError):
    """env_only mode without DB_USERNAME/DB_PASSWORD."""


class VaultCredentialsUnavailableError(AuthError):
    """required mode and the secret store produced no credentials."""


class AuthExhaustedError(AuthError):
    """preferred mode with the secret store failed and no usable fallback."""

    def __init__(self, message: str, fallback_enabled: bool):
        self.fallback_enabled = fallback_enabled
        super().__init__(message)


class ConnectionFailedError(GatekeeperError):
    """A backend driver failed to establish the connection."""

    def __init__(self, backend: str, cause: BaseException):
        self.backend = backend
        self.cause = cause
        super().__init__(f"{backend} connection failed: {cause}")


class QueryFailedError(GatekeeperError):
    """A backend driver failed while listing items."""

    def __init__(self, backend: str, cause: BaseException):
        self.backend = backend
        self.cause = cause
        super().__init__(f"{backend} query failed: {cause}")
