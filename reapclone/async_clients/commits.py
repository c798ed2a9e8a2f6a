"""Async Commits resource client."""

from typing import TYPE_CHECKING

from reapclone.clients.commits import parse_commit
from reapclone.endpoints import Endpoint, PathParameters
from reapclone.types.repos import Commit

if TYPE_CHECKING:
    from reapclone.async_transport import AsyncHTTPTransport


class AsyncCommitsClient:
    """Async client for commit listing."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    def _params(self, owner: str, repo: str) -> PathParameters:
        return PathParameters(base_url=self.transport.base_url, owner=owner, repo=repo)

    async def list_all(
        self, owner: str, repo: str, max_pages: int | None = None
    ) -> list[Commit]:
        """List every commit of a repository, newest first."""
        return await self.transport.fetch_all(
            Endpoint.LIST_COMMITS,
            self._params(owner, repo),
            parse_commit,
            max_pages=max_pages,
        )

    async def list(
        self, owner: str, repo: str, page: int = 1, per_page: int = 30
    ) -> list[Commit]:
        """List one page of a repository's commits."""
        return await self.transport.fetch_page(
            Endpoint.LIST_COMMITS,
            self._params(owner, repo),
            parse_commit,
            page=page,
            per_page=per_page,
        )
