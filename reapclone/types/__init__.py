"""reapclone type definitions.

This module exports all data model types used by the package.
"""

from reapclone.types.clone import CloneOutcome, CloneReport
from reapclone.types.repos import AccountType, Branch, Commit, Repository

__all__ = [
    # Listing types
    "AccountType",
    "Repository",
    "Commit",
    "Branch",
    # Clone types
    "CloneOutcome",
    "CloneReport",
]
