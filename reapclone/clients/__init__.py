"""reapclone resource clients."""

from reapclone.clients.branches import BranchesClient
from reapclone.clients.commits import CommitsClient
from reapclone.clients.repos import ReposClient

__all__ = [
    "ReposClient",
    "CommitsClient",
    "BranchesClient",
]
