"""Repository listing data models."""

from dataclasses import dataclass
from enum import Enum


class AccountType(Enum):
    """Kind of GitHub account that owns a set of repositories."""

    USER = "users"
    ORGANISATION = "orgs"


@dataclass(frozen=True)
class Repository:
    """Repository information."""

    clone_url: str  # SSH form, e.g. git@github.com:owner/name.git
    name: str
    archived: bool


@dataclass(frozen=True)
class Commit:
    """Commit information."""

    sha: str
    author_login: str | None
    author_email: str | None


@dataclass(frozen=True)
class Branch:
    """Branch information."""

    name: str
