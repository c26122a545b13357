"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

FastAPI application entrypoint.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gatekeeper._version import __version__
from gatekeeper.app.api.router import router
from gatekeeper.app.core.config import settings
from gatekeeper.app.core.policy import looks_like_real_token
from gatekeeper.app.database import create_gateway


#############################################################################
# APP FACTORY
#############################################################################
LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI Lifespan"""
    gateway = create_gateway()
    policy = gateway.policy
    if policy.vault_token and not looks_like_real_token(policy.vault_token):
        LOGGER.warning("VAULT_TOKEN looks like a placeholder; the secret store will not be consulted")
    LOGGER.info(
        "Credential policy: auth_mode=%s secondary_mode=%s",
        policy.auth_mode.value,
        policy.secondary_mode.value,
    )
    app.state.gateway = gateway
    await gateway.ensure_ready()
    try:
        yield
    finally:
        await gateway.close()


BASE_PATH = settings.url_prefix.strip("/")
BASE_PATH = f"/{BASE_PATH}" if BASE_PATH else ""

app = FastAPI(
    title="Gatekeeper DB",
    version=__version__,
    root_path=BASE_PATH,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(router)
