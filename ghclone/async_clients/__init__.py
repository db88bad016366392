"""ghclone async resource clients."""

from ghclone.async_clients.repos import AsyncReposClient

__all__ = [
    "AsyncReposClient",
]
