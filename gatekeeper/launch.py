"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Command-line launcher for the API server.
"""

import argparse
import logging

import uvicorn

from gatekeeper.app.core.config import settings

LOGGER = logging.getLogger("launch_server")


def main(argv: list[str] | None = None) -> None:
    """Start the uvicorn server for FastAPI"""
    parser = argparse.ArgumentParser(description="Start the Gatekeeper DB API server")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    args = parser.parse_args(argv)

    LOGGER.info("Backend listening on :%i", args.port)
    uvicorn.run("gatekeeper.app.main:app", host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
