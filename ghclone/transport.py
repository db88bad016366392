"""
HTTP Transport for ghclone.

Fetches single pages of an account's repository listing and turns
unsuccessful responses into typed exceptions. No retries are attempted:
every failure is reported to the caller as soon as it happens.
"""

import time
from typing import Any
from urllib.parse import quote

import httpx

from ghclone import __version__
from ghclone.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    HttpStatusError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
)
from ghclone.logging import log_http_request, log_http_response
from ghclone.types.repos import PageResponse

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
PER_PAGE = 100

USER_AGENT = f"ghclone/{__version__}"
ACCEPT = "application/vnd.github+json, application/json"


def build_headers(token: str | None) -> dict[str, str]:
    """Build the fixed request headers, adding Authorization only for a non-empty token."""
    headers = {"User-Agent": USER_AGENT, "Accept": ACCEPT}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def validate_base_url(base_url: str) -> str:
    """Return ``base_url`` without a trailing slash, or raise ConfigurationError."""
    if not base_url.startswith(("http://", "https://")):
        raise ConfigurationError(
            f"Invalid base URL: {base_url!r}. Must start with http:// or https://"
        )
    return base_url.rstrip("/")


def listing_path(account: str) -> str:
    """Path of the repository listing endpoint for ``account``."""
    if not account:
        raise ConfigurationError("account must be a non-empty string")
    return f"/users/{quote(account, safe='')}/repos"


def listing_params(page: int, per_page: int) -> dict[str, Any]:
    if page < 1:
        raise ConfigurationError(f"page must be a positive integer, got {page}")
    return {"page": page, "per_page": per_page}


def to_page_response(account: str, page: int, response: httpx.Response) -> PageResponse:
    """Capture status, headers, body and parsed Link relations of a response."""
    return PageResponse(
        account=account,
        page=page,
        status_code=response.status_code,
        headers={k.lower(): v for k, v in response.headers.items()},
        body=response.text,
        links={str(rel): dict(attrs) for rel, attrs in response.links.items()},
    )


def parse_error_response(response: httpx.Response) -> HttpStatusError:
    """
    Parse an error response into a typed exception.

    Args:
        response: HTTP response with error status

    Returns:
        Appropriate HttpStatusError subclass
    """
    try:
        data = response.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}

    status_code = response.status_code
    body = response.text
    message = data.get("message") or f"HTTP {status_code}"
    request_id = response.headers.get("X-GitHub-Request-Id")

    # GitHub reports an exhausted quota as 403 with zero remaining requests
    quota_exhausted = response.headers.get("X-RateLimit-Remaining") == "0"

    if status_code == 429 or (status_code == 403 and quota_exhausted):
        return RateLimitedError(
            status_code, body, _retry_after(response), message, request_id
        )
    elif status_code == 401:
        return AuthenticationError(status_code, body, message, request_id)
    elif status_code == 403:
        return AuthorizationError(status_code, body, message, request_id)
    elif status_code == 404:
        return NotFoundError(status_code, body, message, request_id)
    elif status_code >= 500:
        return ServerError(status_code, body, message, request_id)
    else:
        return HttpStatusError(status_code, body, message, request_id)


def _retry_after(response: httpx.Response) -> int:
    """Seconds until the quota resets, from Retry-After or X-RateLimit-Reset."""
    retry_after = response.headers.get("Retry-After")
    if retry_after:
        try:
            return int(retry_after)
        except ValueError:
            pass

    reset = response.headers.get("X-RateLimit-Reset")
    if reset:
        try:
            return max(int(reset) - int(time.time()), 0)
        except ValueError:
            pass

    return 60


class HTTPTransport:
    """
    HTTP transport for the repository listing endpoint.

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
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Optional access token sent as a bearer credential
            timeout: Request timeout in seconds
            per_page: Page size requested from the listing endpoint
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.base_url = validate_base_url(base_url)
        self.timeout = timeout
        self.per_page = per_page
        self._headers = build_headers(token)

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=self._headers,
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def fetch_page(self, account: str, page: int) -> PageResponse:
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
            response = self._client.get(path, params=params)
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
