"""
Tests for async repository enumeration.

Feature: paginated repository listing
"""

import httpx
import pytest

from ghclone.async_client import AsyncGitHubClient
from ghclone.async_transport import AsyncHTTPTransport
from ghclone.exceptions import (
    AuthenticationError,
    MalformedRecordError,
    RateLimitedError,
    ServerError,
    TransportError,
)
from ghclone.testing import (
    MockGitHubAPI,
    create_repository_record,
    create_repository_records,
)
from ghclone.types.repos import RepositoryRef


@pytest.mark.asyncio
async def test_async_enumerate_collects_all_pages(async_github_client, mock_api) -> None:
    mock_api.add_account("octo", create_repository_records("octo", 250))

    refs = await async_github_client.repos.enumerate("octo")

    assert len(refs) == 250
    assert refs[0].name == "repo-0000"
    assert refs[-1].name == "repo-0249"
    assert mock_api.requested_pages("octo") == [1, 2, 3]


@pytest.mark.asyncio
async def test_async_octo_two_pages(async_github_client, mock_api) -> None:
    mock_api.add_pages(
        "octo",
        [
            [create_repository_record("octo", "alpha"), create_repository_record("octo", "beta")],
            [create_repository_record("octo", "gamma")],
        ],
    )

    refs = await async_github_client.repos.enumerate("octo")

    assert [ref.name for ref in refs] == ["alpha", "beta", "gamma"]
    assert mock_api.request_count("octo") == 2


@pytest.mark.asyncio
async def test_async_empty_org_with_next_link(async_github_client, mock_api) -> None:
    mock_api.add_pages("empty-org", [[]], always_next=True)

    assert await async_github_client.repos.enumerate("empty-org") == []
    assert mock_api.request_count("empty-org") == 1


@pytest.mark.asyncio
async def test_async_iter_pages(async_github_client, mock_api) -> None:
    mock_api.add_account("octo", create_repository_records("octo", 101))

    numbers = [page.number async for page in async_github_client.repos.iter_pages("octo")]

    assert numbers == [1, 2]


@pytest.mark.asyncio
async def test_async_error_on_later_page_raises(async_github_client, mock_api) -> None:
    mock_api.add_account("octo", create_repository_records("octo", 300))
    mock_api.configure_error("octo", 3, 503)

    with pytest.raises(ServerError):
        await async_github_client.repos.enumerate("octo")

    assert mock_api.requested_pages("octo") == [1, 2, 3]


@pytest.mark.asyncio
async def test_async_connection_error(async_github_client, mock_api) -> None:
    mock_api.add_account("octo", [])
    mock_api.configure_connection_error("octo", 1)

    with pytest.raises(TransportError):
        await async_github_client.repos.enumerate("octo")


@pytest.mark.asyncio
async def test_async_rate_limited(async_github_client, mock_api) -> None:
    mock_api.add_account("octo", [])
    mock_api.configure_error(
        "octo",
        1,
        429,
        body={"message": "API rate limit exceeded"},
        headers={"Retry-After": "7"},
    )

    with pytest.raises(RateLimitedError) as exc_info:
        await async_github_client.repos.enumerate("octo")

    assert exc_info.value.retry_after == 7
    assert exc_info.value.message == "API rate limit exceeded"


@pytest.mark.asyncio
async def test_async_malformed_record(async_github_client, mock_api) -> None:
    mock_api.add_pages("octo", [[{"name": "no-url"}]])

    with pytest.raises(MalformedRecordError):
        await async_github_client.repos.enumerate("octo")


@pytest.mark.asyncio
async def test_async_transport_sends_bearer_token() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(401, json={"message": "Bad credentials"})

    async with AsyncHTTPTransport(
        token="bad-token", transport=httpx.MockTransport(handler)
    ) as transport:
        with pytest.raises(AuthenticationError) as exc_info:
            await transport.fetch_page("octo", 1)

    assert captured[0].headers["Authorization"] == "Bearer bad-token"
    assert exc_info.value.message == "Bad credentials"


@pytest.mark.asyncio
async def test_async_client_context_manager_and_url_field() -> None:
    api = MockGitHubAPI()
    api.add_account("octo", [create_repository_record("octo", "hello")])

    async with AsyncGitHubClient(transport=api.transport(), url_field="ssh_url") as client:
        refs = await client.repos.enumerate("octo")

    assert refs == [RepositoryRef("hello", "git@github.com:octo/hello.git")]
