"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from gatekeeper.app.api.deps import get_gateway
from gatekeeper.app.api.schemas import HealthResponse
from gatekeeper.app.core.access import is_unlocked
from gatekeeper.app.database import DatabaseGateway

noauth = APIRouter()


@noauth.get("/health", response_model=HealthResponse)
async def health(gateway: DatabaseGateway = Depends(get_gateway)):
    """Report readiness, the auth mode, and whether data is unlocked."""

    ready = await gateway.ensure_ready()
    policy = gateway.policy
    source = gateway.auth_source
    return HealthResponse(
        db_ready=ready,
        mode=policy.auth_mode.value,
        channel=source.value if source is not None else None,
        unlocked=ready and is_unlocked(policy.auth_mode, policy.secondary_mode, source),
    )


@noauth.get("/ping", response_class=PlainTextResponse)
async def ping():
    """Liveness check"""
    return "pong"
