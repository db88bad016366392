"""Repository listing data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RepositoryRef:
    """The minimal (name, clone URL) pair needed to clone a repository."""

    name: str
    clone_url: str


@dataclass
class PageResponse:
    """Raw response for one page of an account's repository listing."""

    account: str
    page: int
    status_code: int
    headers: dict[str, str]
    body: str
    links: dict[str, dict[str, str]] = field(default_factory=dict)  # rel -> attrs


@dataclass
class Page:
    """Parsed page of raw repository records."""

    number: int
    items: list[dict[str, Any]]
    has_next: bool
