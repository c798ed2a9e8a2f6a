"""reapclone testing utilities.

Provides a fake GitHub API and a fake cloner for testing code built on
reapclone. Pytest fixtures live in ``reapclone.testing.conftest``.
"""

from reapclone.testing.mock import (
    FakeGitHubAPI,
    RecordedRequest,
    RecordingCloner,
    branch_payload,
    commit_payload,
    create_mock_repository,
    repository_payload,
)

__all__ = [
    # Fakes
    "FakeGitHubAPI",
    "RecordedRequest",
    "RecordingCloner",
    # Helper functions
    "repository_payload",
    "commit_payload",
    "branch_payload",
    "create_mock_repository",
]
