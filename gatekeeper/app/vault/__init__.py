"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Secret store access.
"""

from .client import SecretRecord, extract_record, read_secret
from .paths import SecretPath, normalize_secret_path

__all__ = ["SecretPath", "SecretRecord", "extract_record", "normalize_secret_path", "read_secret"]
