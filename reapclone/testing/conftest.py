"""
Pytest plugin for reapclone testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["reapclone.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from reapclone.testing.fixtures import (
    fake_github,
    github_client,
    recording_cloner,
    sample_repositories,
    sample_repository,
)

__all__ = [
    "fake_github",
    "github_client",
    "recording_cloner",
    "sample_repository",
    "sample_repositories",
]
