"""
Pytest fixtures for reapclone testing.
"""

from collections.abc import Generator

import pytest

from reapclone.client import GitHubClient
from reapclone.testing.mock import (
    FakeGitHubAPI,
    RecordingCloner,
    create_mock_repository,
)
from reapclone.types.repos import Repository


@pytest.fixture
def fake_github() -> Generator[FakeGitHubAPI, None, None]:
    """
    Provide an empty FakeGitHubAPI.

    Example:
        ```python
        def test_listing(fake_github, github_client):
            fake_github.add_pages("/users/octocat/repos", [[...]])
            github_client.repos.list_all("octocat", AccountType.USER)
        ```
    """
    api = FakeGitHubAPI()
    yield api
    api.reset()


@pytest.fixture
def github_client(fake_github: FakeGitHubAPI) -> Generator[GitHubClient, None, None]:
    """Provide a GitHubClient wired to ``fake_github``."""
    client = fake_github.client(token="test-token")
    yield client
    client.close()


@pytest.fixture
def recording_cloner() -> RecordingCloner:
    return RecordingCloner()


@pytest.fixture
def sample_repository() -> Repository:
    return create_mock_repository()


@pytest.fixture
def sample_repositories() -> list[Repository]:
    """Five repositories, the second of them archived."""
    return [
        create_mock_repository(f"repo-{i}", archived=(i == 1)) for i in range(5)
    ]
