"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Root pytest configuration for the test suite.

This conftest.py uses pytest_plugins to automatically load fixtures from
shared_fixtures (factory fixtures: make_policy, make_credentials, ...).

Constants (e.g. TEST_DB_USER) still require explicit imports in the test
files that use them. The 'tests' directory is on pythonpath (pyproject.toml),
enabling 'from shared_fixtures import X'.
"""

import pytest

pytest_plugins = [
    "shared_fixtures",
]


@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio only."""
    return "asyncio"
