"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Common interface for backend connectors.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from gatekeeper.app.credentials import CredentialTriple
from gatekeeper.app.database.config import ConnectionTarget

Item = dict[str, Any]


class Connector(ABC):
    """Connect to one backend type and list its seeded items."""

    default_port: ClassVar[Optional[int]] = None
    # Driver exceptions the gateway wraps into ConnectionFailedError / QueryFailedError
    errors: ClassVar[tuple[type[BaseException], ...]] = ()

    @abstractmethod
    async def connect(self, target: ConnectionTarget, credentials: CredentialTriple) -> Any:
        """Open and verify a connection, returning the driver object."""

    @abstractmethod
    async def list_items(self, connection: Any, limit: int) -> list[Item]:
        """Return up to ``limit`` records, each exposing an ``id``."""

    @abstractmethod
    async def close(self, connection: Any) -> None:
        """Release the connection."""
