"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Gated item listing.
"""

import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gatekeeper.app.api.deps import get_gateway
from gatekeeper.app.api.schemas import ErrorResponse, ItemsResponse
from gatekeeper.app.core.access import is_unlocked
from gatekeeper.app.core.config import settings
from gatekeeper.app.core.errors import QueryFailedError
from gatekeeper.app.database import DatabaseGateway, list_items

LOGGER = logging.getLogger(__name__)

LOCKED_MESSAGE = "The data remains silent until the keeper is acknowledged."
# Signed ASCII decimal integers; "1_000" and "1e3" do not match
INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")

router = APIRouter(prefix="/api")


def normalize_limit(raw: Optional[str], default: int, maximum: int) -> int:
    """Clamp ``raw`` to ``[1, maximum]``; non-positive or non-integer values give ``default``."""

    if raw is None or not INTEGER_PATTERN.fullmatch(raw):
        return default
    value = int(raw)
    if value <= 0:
        return default
    return min(value, maximum)


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=error, message=message).model_dump())


@router.get(
    "/items",
    response_model=ItemsResponse,
    responses={403: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def get_items(limit: Optional[str] = None, gateway: DatabaseGateway = Depends(get_gateway)):
    """List items when the connection is ready and the gate is unlocked."""

    if not await gateway.ensure_ready():
        return _error(503, "not_ready", "Database not ready")

    policy = gateway.policy
    if not is_unlocked(policy.auth_mode, policy.secondary_mode, gateway.auth_source):
        return _error(403, "locked", LOCKED_MESSAGE)

    count = normalize_limit(limit, settings.default_items_limit, settings.max_items_limit)
    try:
        items = await list_items(gateway.handle, count)
    except QueryFailedError as exc:
        LOGGER.error("Listing items failed: %s", exc)
        return _error(500, "query_failed", "Failed to list items")
    return ItemsResponse(items=items)
