"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Per-request authorization decision for item listing.
"""

from typing import Optional

from gatekeeper.app.core.policy import AuthMode, AuthSource, SecondaryMode


def is_unlocked(
    auth_mode: AuthMode,
    secondary_mode: SecondaryMode,
    auth_source: Optional[AuthSource],
) -> bool:
    """Decide whether data may be served given how the connection authenticated.

    - No connection yet: locked.
    - ``required``: unlocked only for secret-store credentials.
    - ``env_only``: always unlocked.
    - ``preferred`` + ``disabled``: a process that fell back to env stays locked.
    - ``preferred`` + ``env_fallback``: either source is acceptable.
    """

    if auth_source is None:
        return False
    if auth_mode is AuthMode.ENV_ONLY:
        return True
    if auth_mode is AuthMode.PREFERRED and secondary_mode is SecondaryMode.ENV_FALLBACK:
        return True
    return auth_source.is_vault
