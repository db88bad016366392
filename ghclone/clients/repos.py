"""Repositories resource client: paginated enumeration of an account's repositories."""

import json
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from ghclone.exceptions import ConfigurationError, MalformedRecordError
from ghclone.logging import get_logger
from ghclone.types.repos import Page, PageResponse, RepositoryRef

if TYPE_CHECKING:
    from ghclone.transport import HTTPTransport

logger = get_logger()

URL_FIELDS = ("html_url", "clone_url", "ssh_url")
DEFAULT_URL_FIELD = "html_url"


def validate_url_field(url_field: str) -> str:
    if url_field not in URL_FIELDS:
        raise ConfigurationError(
            f"Invalid url_field: {url_field}. Must be one of {', '.join(URL_FIELDS)}"
        )
    return url_field


def parse_page(response: PageResponse) -> Page:
    """
    Decode a page body and read its continuation signal.

    The body must be a JSON array of objects. Continuation is signalled by a
    ``rel="next"`` entry in the Link header; its absence ends enumeration.
    """
    try:
        data = json.loads(response.body)
    except ValueError as e:
        raise MalformedRecordError(
            f"Page {response.page} of {response.account} is not valid JSON: {e}",
            page=response.page,
        ) from e

    if not isinstance(data, list):
        raise MalformedRecordError(
            f"Page {response.page} of {response.account} is not a JSON array",
            page=response.page,
        )

    return Page(number=response.page, items=data, has_next="next" in response.links)


def parse_repository_ref(
    record: Any, url_field: str, page: int, index: int
) -> RepositoryRef:
    """Extract (name, clone URL) from one raw record, rejecting incomplete records."""
    if not isinstance(record, dict):
        raise MalformedRecordError(
            f"Record {index} on page {page} is not an object", page=page, index=index
        )

    name = record.get("name")
    clone_url = record.get(url_field)

    for field_name, value in (("name", name), (url_field, clone_url)):
        if not isinstance(value, str) or not value:
            raise MalformedRecordError(
                f"Record {index} on page {page} has no usable '{field_name}'",
                page=page,
                index=index,
            )

    return RepositoryRef(name=name, clone_url=clone_url)


def refs_from_page(page: Page, url_field: str) -> list[RepositoryRef]:
    return [
        parse_repository_ref(record, url_field, page.number, index)
        for index, record in enumerate(page.items)
    ]


class ReposClient:
    """Client for repository listing operations."""

    def __init__(
        self, transport: "HTTPTransport", url_field: str = DEFAULT_URL_FIELD
    ) -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
            url_field: Record field used as the clone URL
                ("html_url", "clone_url" or "ssh_url")
        """
        self.transport = transport
        self.url_field = validate_url_field(url_field)

    def iter_pages(self, account: str) -> Iterator[Page]:
        """
        Yield the non-empty pages of ``account``'s repository listing in order.

        Each page is requested exactly once. Iteration stops at the first
        empty page, or after a page without a continuation link, whichever
        comes first.

        Raises:
            HttpStatusError: If any page request is answered with an error status
            TransportError: If any page request fails to complete
            MalformedRecordError: If a page body is not a JSON array
        """
        number = 1
        while True:
            page = parse_page(self.transport.fetch_page(account, number))

            if not page.items:
                logger.debug("Page %d of %s is empty, stopping", number, account)
                return

            yield page

            if not page.has_next:
                logger.debug("Page %d of %s has no next link, stopping", number, account)
                return

            number += 1

    def enumerate(self, account: str) -> list[RepositoryRef]:
        """
        List every repository owned by ``account``.

        Args:
            account: Account (user or organization) login

        Returns:
            RepositoryRef objects in the platform's page order

        Raises:
            HttpStatusError: On an error status for any page
            TransportError: On connection failures
            MalformedRecordError: On a record missing its name or clone URL
        """
        refs: list[RepositoryRef] = []
        for page in self.iter_pages(account):
            refs.extend(refs_from_page(page, self.url_field))

        logger.info("Found %d repositories for %s", len(refs), account)
        return refs
