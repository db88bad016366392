"""ghclone type definitions.

This module exports all data model types used by the package.
"""

from ghclone.types.clones import CloneOutcome, CloneReport, CloneStatus
from ghclone.types.repos import Page, PageResponse, RepositoryRef

__all__ = [
    # Listing types
    "RepositoryRef",
    "PageResponse",
    "Page",
    # Clone types
    "CloneStatus",
    "CloneOutcome",
    "CloneReport",
]
