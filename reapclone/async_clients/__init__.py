"""reapclone async resource clients."""

from reapclone.async_clients.branches import AsyncBranchesClient
from reapclone.async_clients.commits import AsyncCommitsClient
from reapclone.async_clients.repos import AsyncReposClient

__all__ = [
    "AsyncReposClient",
    "AsyncCommitsClient",
    "AsyncBranchesClient",
]
