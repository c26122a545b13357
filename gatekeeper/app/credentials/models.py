"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.
"""

from dataclasses import dataclass, field

from gatekeeper.app.core.policy import AuthSource


@dataclass(frozen=True)
class CredentialTriple:
    """Resolved database credentials tagged with the tier that produced them."""

    username: str
    password: str = field(repr=False)
    auth_source: AuthSource
