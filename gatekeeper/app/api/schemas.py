"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Pydantic models for the HTTP responses.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class HealthResponse(BaseModel):
    """Connection readiness and gate state."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ok: bool = True
    db_ready: bool
    mode: str
    channel: Optional[str] = None
    unlocked: bool


class ItemsResponse(BaseModel):
    """Items listed from the configured backend."""

    items: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    """Structured error body; never carries stack traces."""

    error: str
    message: Optional[str] = None
