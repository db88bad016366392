"""
Pytest fixtures for ghclone testing.

Provides common fixtures for testing code that lists and clones repositories.
"""

import zlib
from collections.abc import AsyncGenerator, Generator
from typing import Any

import pytest
import pytest_asyncio

from ghclone.async_client import AsyncGitHubClient
from ghclone.client import GitHubClient
from ghclone.testing.mock import MockGitHelper, MockGitHubAPI
from ghclone.types.repos import RepositoryRef


# ============================================================================
# Helper Functions
# ============================================================================


def create_repository_record(
    owner: str = "octo",
    name: str = "hello-world",
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Create a raw repository record shaped like the listing endpoint's items.

    Args:
        owner: Owner login
        name: Repository name
        **kwargs: Additional fields to override

    Returns:
        Repository record dictionary
    """
    record: dict[str, Any] = {
        "id": zlib.crc32(f"{owner}/{name}".encode()),
        "name": name,
        "full_name": f"{owner}/{name}",
        "private": False,
        "owner": {"login": owner},
        "html_url": f"https://github.com/{owner}/{name}",
        "clone_url": f"https://github.com/{owner}/{name}.git",
        "ssh_url": f"git@github.com:{owner}/{name}.git",
        "default_branch": "main",
        "fork": False,
    }
    record.update(kwargs)
    return record


def create_repository_records(owner: str, count: int, prefix: str = "repo") -> list[dict[str, Any]]:
    """Create ``count`` records named ``{prefix}-0000``, ``{prefix}-0001``, ..."""
    return [create_repository_record(owner, f"{prefix}-{i:04d}") for i in range(count)]


def create_mock_repository_ref(
    name: str = "hello-world",
    owner: str = "octo",
    clone_url: str | None = None,
) -> RepositoryRef:
    """Create a RepositoryRef pointing at ``https://github.com/{owner}/{name}``."""
    return RepositoryRef(
        name=name,
        clone_url=clone_url or f"https://github.com/{owner}/{name}",
    )


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_api() -> Generator[MockGitHubAPI, None, None]:
    """
    Provide an empty MockGitHubAPI.

    Example:
        ```python
        def test_listing(mock_api, github_client):
            mock_api.add_account("octo", [create_repository_record("octo", "a")])
            assert [r.name for r in github_client.repos.enumerate("octo")] == ["a"]
        ```
    """
    api = MockGitHubAPI()
    yield api
    api.reset()


@pytest.fixture
def mock_git() -> Generator[MockGitHelper, None, None]:
    """Provide a MockGitHelper that creates directories instead of cloning."""
    git = MockGitHelper()
    yield git
    git.reset()


@pytest.fixture
def github_client(mock_api: MockGitHubAPI) -> Generator[GitHubClient, None, None]:
    """Provide a GitHubClient whose requests are served by ``mock_api``."""
    client = GitHubClient(token="test-token", transport=mock_api.transport())
    yield client
    client.close()


@pytest_asyncio.fixture
async def async_github_client(
    mock_api: MockGitHubAPI,
) -> AsyncGenerator[AsyncGitHubClient, None]:
    """Provide an AsyncGitHubClient whose requests are served by ``mock_api``."""
    client = AsyncGitHubClient(token="test-token", transport=mock_api.transport())
    yield client
    await client.close()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def mock_account() -> str:
    """Provide a test account login."""
    return "octo"


@pytest.fixture
def sample_record() -> dict[str, Any]:
    """Provide a sample raw repository record."""
    return create_repository_record("octo", "hello-world")


@pytest.fixture
def sample_refs() -> list[RepositoryRef]:
    """Provide five sample RepositoryRef objects."""
    return [create_mock_repository_ref(f"repo-{i}") for i in range(5)]
