"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Read-only client for the secret store HTTP API.
"""

import logging
from typing import Any, Optional

import httpx

from gatekeeper.app.core.errors import ConfigurationError, StoreUnavailableError
from gatekeeper.app.vault.paths import normalize_secret_path

LOGGER = logging.getLogger(__name__)

TOKEN_HEADER = "X-Vault-Token"

SecretRecord = dict[str, Any]


def extract_record(body: Any, is_dynamic: bool) -> SecretRecord:
    """Unwrap the flat credential record from either response envelope.

    Dynamic credentials arrive as ``{"data": {...}}``; KV v2 secrets as
    ``{"data": {"data": {...}, "metadata": {...}}}``.
    """

    if not isinstance(body, dict):
        return {}
    data = body.get("data")
    if is_dynamic:
        return data if isinstance(data, dict) else body
    if isinstance(data, dict):
        nested = data.get("data")
        return nested if isinstance(nested, dict) else data
    return {}


async def read_secret(
    address: Optional[str],
    token: Optional[str],
    path: Optional[str],
    *,
    timeout: float = 10.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SecretRecord:
    """Read a secret and return its flat record.

    Raises:
        ConfigurationError: address, token or path is empty.
        StoreUnavailableError: transport failure, timeout, non-2xx status or
            an undecodable body. Never retried.
    """

    if not address or not token or not path:
        raise ConfigurationError("Vault parameters missing (addr/token/path)")

    secret_path = normalize_secret_path(path)
    url = f"{address.rstrip('/')}/{secret_path.path}"
    LOGGER.debug("Reading secret path=%s dynamic=%s", secret_path.path, secret_path.is_dynamic)

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url, headers={TOKEN_HEADER: token})
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code
        raise StoreUnavailableError(f"Vault returned HTTP {status_code}", status_code=status_code) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise StoreUnavailableError(f"Vault request failed: {exc.__class__.__name__}") from exc

    try:
        body = response.json()
    except ValueError as exc:
        raise StoreUnavailableError(
            "Vault response is not valid JSON", status_code=response.status_code
        ) from exc

    return extract_record(body, secret_path.is_dynamic)
