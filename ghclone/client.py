"""
ghclone main client.

Provides the primary interface for listing an account's repositories.
"""

import os
from typing import Any

import httpx

from ghclone.clients import ReposClient
from ghclone.clients.repos import DEFAULT_URL_FIELD
from ghclone.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, HTTPTransport


class GitHubClient:
    """
    Main client for the repository listing API.

    Example:
        ```python
        from ghclone import GitHubClient

        with GitHubClient(token="ghp_...") as client:
            for ref in client.repos.enumerate("octo"):
                print(ref.name, ref.clone_url)

        # Or create from environment variables
        client = GitHubClient.from_env()
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
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: Optional access token, attached as a bearer credential
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            url_field: Record field used as the clone URL (default: html_url)
            transport: Optional httpx transport, mainly for tests

        Raises:
            ConfigurationError: If base_url or url_field is invalid
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            transport=transport,
        )

        self.repos = ReposClient(self._transport, url_field=url_field)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> "GitHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: Access token (optional)
            GHCLONE_BASE_URL: Base URL for API (optional, default: https://api.github.com)
            GHCLONE_URL_FIELD: Clone URL field (optional, default: html_url)

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        return cls(
            token=os.environ.get("GITHUB_TOKEN") or None,
            base_url=os.environ.get("GHCLONE_BASE_URL", cls.DEFAULT_BASE_URL),
            timeout=timeout,
            url_field=os.environ.get("GHCLONE_URL_FIELD", DEFAULT_URL_FIELD),
            transport=transport,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
