"""Shared pytest configuration."""

from ghclone.testing.conftest import (  # noqa: F401
    async_github_client,
    github_client,
    mock_account,
    mock_api,
    mock_git,
    sample_record,
    sample_refs,
)
