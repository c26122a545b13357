"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Credential resolution across the secret store and static configuration.
"""

from .models import CredentialTriple
from .resolver import extract_credentials, resolve_credentials

__all__ = ["CredentialTriple", "extract_credentials", "resolve_credentials"]
