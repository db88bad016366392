"""
ghclone async client.

Provides the async interface for listing an account's repositories.
"""

import os
from typing import Any

import httpx

from ghclone.async_clients import AsyncReposClient
from ghclone.async_transport import AsyncHTTPTransport
from ghclone.clients.repos import DEFAULT_URL_FIELD
from ghclone.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class AsyncGitHubClient:
    """
    Async client for the repository listing API.

    Example:
        ```python
        import asyncio
        from ghclone import AsyncGitHubClient

        async def main():
            async with AsyncGitHubClient.from_env() as client:
                refs = await client.repos.enumerate("octo")

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        url_field: str = DEFAULT_URL_FIELD,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the async client.

        Args:
            token: Optional access token, attached as a bearer credential
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            url_field: Record field used as the clone URL (default: html_url)
            transport: Optional httpx async transport, mainly for tests
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            transport=transport,
        )

        self.repos = AsyncReposClient(self._transport, url_field=url_field)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "AsyncGitHubClient":
        """
        Create an async client from environment variables.

        Reads the same variables as :meth:`GitHubClient.from_env`.
        """
        return cls(
            token=os.environ.get("GITHUB_TOKEN") or None,
            base_url=os.environ.get("GHCLONE_BASE_URL", cls.DEFAULT_BASE_URL),
            timeout=timeout,
            url_field=os.environ.get("GHCLONE_URL_FIELD", DEFAULT_URL_FIELD),
            transport=transport,
        )

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGitHubClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
