"""Commits resource client."""

from typing import TYPE_CHECKING, Any

from reapclone.endpoints import Endpoint, PathParameters
from reapclone.types.repos import Commit

if TYPE_CHECKING:
    from reapclone.transport import HTTPTransport


def parse_commit(data: dict[str, Any]) -> Commit:
    """
    Parse a commit listing element.

    ``author`` is the linked GitHub account and is null for commits whose
    email matches no account; the email comes from the git metadata.
    """
    author = data.get("author") or {}
    git_author = (data.get("commit") or {}).get("author") or {}
    return Commit(
        sha=data["sha"],
        author_login=author.get("login"),
        author_email=git_author.get("email"),
    )


class CommitsClient:
    """Client for commit listing."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def _params(self, owner: str, repo: str) -> PathParameters:
        return PathParameters(base_url=self.transport.base_url, owner=owner, repo=repo)

    def list_all(
        self, owner: str, repo: str, max_pages: int | None = None
    ) -> list[Commit]:
        """List every commit of a repository, newest first."""
        return self.transport.fetch_all(
            Endpoint.LIST_COMMITS,
            self._params(owner, repo),
            parse_commit,
            max_pages=max_pages,
        )

    def list(
        self, owner: str, repo: str, page: int = 1, per_page: int = 30
    ) -> list[Commit]:
        """List one page of a repository's commits."""
        return self.transport.fetch_page(
            Endpoint.LIST_COMMITS,
            self._params(owner, repo),
            parse_commit,
            page=page,
            per_page=per_page,
        )
