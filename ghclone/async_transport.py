"""
Async HTTP Transport for ghclone.

Same contract as :mod:`ghclone.transport`, using the httpx async client.
"""

import time
from typing import Any

import httpx

from ghclone.exceptions import TransportError
from ghclone.logging import log_http_request, log_http_response
from ghclone.transport import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    PER_PAGE,
    build_headers,
    listing_params,
    listing_path,
    parse_error_response,
    to_page_response,
    validate_base_url,
)
from ghclone.types.repos import PageResponse


class AsyncHTTPTransport:
    """
    Async HTTP transport for the repository listing endpoint.

    Handles:
    - Fixed User-Agent and Accept headers, optional bearer token
    - One request per page, no caching and no retry
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        per_page: int = PER_PAGE,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Optional access token sent as a bearer credential
            timeout: Request timeout in seconds
            per_page: Page size requested from the listing endpoint
            transport: Optional httpx async transport (e.g. httpx.MockTransport in tests)
        """
        self.base_url = validate_base_url(base_url)
        self.timeout = timeout
        self.per_page = per_page
        self._headers = build_headers(token)

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=self._headers,
            follow_redirects=True,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def fetch_page(self, account: str, page: int) -> PageResponse:
        """
        Fetch one page of the repositories owned by ``account``.

        Args:
            account: Account (user or organization) login
            page: 1-based page number

        Returns:
            The raw page response; continuation is left to the caller

        Raises:
            HttpStatusError: On a 4xx/5xx response
            TransportError: On connection failures and timeouts
        """
        path = listing_path(account)
        params = listing_params(page, self.per_page)
        url = f"{self.base_url}{path}?page={page}&per_page={self.per_page}"

        log_http_request("GET", url, self._headers)
        started = time.perf_counter()

        try:
            response = await self._client.get(path, params=params)
        except httpx.RequestError as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        log_http_response(
            response.status_code,
            url,
            elapsed_ms=(time.perf_counter() - started) * 1000,
            has_next="next" in response.links,
        )

        if response.status_code >= 400:
            raise parse_error_response(response)

        return to_page_response(account, page, response)
