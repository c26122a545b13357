"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Pytest configuration for unit tests.

This conftest automatically marks all tests in the tests/unit/ directory
with the 'unit' marker, enabling selective test execution:

    pytest -m "unit"           # Run only unit tests
    pytest -m "not unit"       # Skip unit tests
"""

import pytest


def pytest_collection_modifyitems(items):
    """Automatically add 'unit' marker to all tests in this directory."""
    for item in items:
        if "/tests/unit/" in str(item.path):
            item.add_marker(pytest.mark.unit)
