"""ghclone resource clients."""

from ghclone.clients.repos import ReposClient

__all__ = [
    "ReposClient",
]
