"""
Pytest plugin for ghclone testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ghclone.testing.conftest"]

Or import the fixtures directly:

    from ghclone.testing.fixtures import mock_api, github_client
"""

# Re-export all fixtures for pytest auto-discovery
from ghclone.testing.fixtures import (
    async_github_client,
    github_client,
    mock_account,
    mock_api,
    mock_git,
    sample_record,
    sample_refs,
)

__all__ = [
    "mock_api",
    "mock_git",
    "github_client",
    "async_github_client",
    "mock_account",
    "sample_record",
    "sample_refs",
]
