"""ghclone testing utilities.

Provides a mock listing endpoint, a mock clone capability and fixtures for
testing applications that use ghclone.
"""

from ghclone.testing.fixtures import (
    create_mock_repository_ref,
    create_repository_record,
    create_repository_records,
)
from ghclone.testing.mock import MockCall, MockGitHelper, MockGitHubAPI, MockPageError

__all__ = [
    # Mocks
    "MockGitHubAPI",
    "MockGitHelper",
    "MockCall",
    "MockPageError",
    # Helper functions
    "create_repository_record",
    "create_repository_records",
    "create_mock_repository_ref",
]
