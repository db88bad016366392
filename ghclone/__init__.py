"""ghclone - list and clone every repository of a GitHub account."""

__version__ = "0.1.0"

from ghclone.async_client import AsyncGitHubClient  # noqa: E402
from ghclone.client import GitHubClient  # noqa: E402
from ghclone.exceptions import (  # noqa: E402
    AuthenticationError,
    AuthorizationError,
    CloneError,
    ConfigurationError,
    DestinationCreateError,
    DestinationExistsError,
    GhCloneError,
    HttpStatusError,
    MalformedRecordError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
)
from ghclone.git import GitHelper  # noqa: E402
from ghclone.logging import configure_logging, get_logger  # noqa: E402
from ghclone.orchestrator import CloneOrchestrator  # noqa: E402
from ghclone.transport import HTTPTransport  # noqa: E402
from ghclone.types import (  # noqa: E402
    CloneOutcome,
    CloneReport,
    CloneStatus,
    Page,
    PageResponse,
    RepositoryRef,
)

__all__ = [
    "__version__",
    # Main Clients
    "GitHubClient",
    "AsyncGitHubClient",
    # Cloning
    "GitHelper",
    "CloneOrchestrator",
    # Types
    "RepositoryRef",
    "PageResponse",
    "Page",
    "CloneStatus",
    "CloneOutcome",
    "CloneReport",
    # Exceptions
    "GhCloneError",
    "ConfigurationError",
    "TransportError",
    "HttpStatusError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ServerError",
    "MalformedRecordError",
    "DestinationExistsError",
    "DestinationCreateError",
    "CloneError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
