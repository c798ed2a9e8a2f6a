"""Async Branches resource client."""

from typing import TYPE_CHECKING

from reapclone.clients.branches import parse_branch
from reapclone.endpoints import Endpoint, PathParameters
from reapclone.types.repos import Branch

if TYPE_CHECKING:
    from reapclone.async_transport import AsyncHTTPTransport


class AsyncBranchesClient:
    """Async client for branch listing."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    def _params(self, owner: str, repo: str) -> PathParameters:
        return PathParameters(base_url=self.transport.base_url, owner=owner, repo=repo)

    async def list_all(
        self, owner: str, repo: str, max_pages: int | None = None
    ) -> list[Branch]:
        """List every branch of a repository."""
        return await self.transport.fetch_all(
            Endpoint.LIST_BRANCHES,
            self._params(owner, repo),
            parse_branch,
            max_pages=max_pages,
        )

    async def list(
        self, owner: str, repo: str, page: int = 1, per_page: int = 30
    ) -> list[Branch]:
        """List one page of a repository's branches."""
        return await self.transport.fetch_page(
            Endpoint.LIST_BRANCHES,
            self._params(owner, repo),
            parse_branch,
            page=page,
            per_page=per_page,
        )
