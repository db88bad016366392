"""Async Repositories resource client."""

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from ghclone.clients.repos import (
    DEFAULT_URL_FIELD,
    parse_page,
    refs_from_page,
    validate_url_field,
)
from ghclone.logging import get_logger
from ghclone.types.repos import Page, RepositoryRef

if TYPE_CHECKING:
    from ghclone.async_transport import AsyncHTTPTransport

logger = get_logger()


class AsyncReposClient:
    """Async client for repository listing operations."""

    def __init__(
        self, transport: "AsyncHTTPTransport", url_field: str = DEFAULT_URL_FIELD
    ) -> None:
        """
        Initialize the async repos client.

        Args:
            transport: Async HTTP transport for making requests
            url_field: Record field used as the clone URL
        """
        self.transport = transport
        self.url_field = validate_url_field(url_field)

    async def iter_pages(self, account: str) -> AsyncIterator[Page]:
        """Yield the non-empty pages of ``account``'s listing, one request per page."""
        number = 1
        while True:
            page = parse_page(await self.transport.fetch_page(account, number))

            if not page.items:
                logger.debug("Page %d of %s is empty, stopping", number, account)
                return

            yield page

            if not page.has_next:
                logger.debug("Page %d of %s has no next link, stopping", number, account)
                return

            number += 1

    async def enumerate(self, account: str) -> list[RepositoryRef]:
        """
        List every repository owned by ``account``.

        Returns:
            RepositoryRef objects in the platform's page order
        """
        refs: list[RepositoryRef] = []
        async for page in self.iter_pages(account):
            refs.extend(refs_from_page(page, self.url_field))

        logger.info("Found %d repositories for %s", len(refs), account)
        return refs
