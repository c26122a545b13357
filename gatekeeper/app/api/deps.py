"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Shared FastAPI dependencies.
"""

from fastapi import Request

from gatekeeper.app.database import DatabaseGateway


def get_gateway(request: Request) -> DatabaseGateway:
    """Return the gateway created by the application lifespan."""

    return request.app.state.gateway
