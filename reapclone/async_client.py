"""
reapclone async client.

Async counterpart of GitHubClient, built on the httpx async client.
"""

import os
from typing import Any

import httpx

from reapclone.async_clients import (
    AsyncBranchesClient,
    AsyncCommitsClient,
    AsyncReposClient,
)
from reapclone.async_transport import AsyncHTTPTransport
from reapclone.client import port_from_env
from reapclone.endpoints import build_base_url
from reapclone.version import USER_AGENT


class AsyncGitHubClient:
    """
    Async client for interacting with the GitHub REST API.

    Example:
        ```python
        import asyncio
        from reapclone import AccountType, AsyncGitHubClient

        async def main():
            async with AsyncGitHubClient() as client:
                repos = await client.repos.list_all("octocat", AccountType.USER)

        asyncio.run(main())
        ```
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str | None = None,
        host: str | None = None,
        port: int | None = None,
        user_agent: str = USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = build_base_url(host, port)
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            base_url=self.base_url,
            user_agent=user_agent,
            token=token,
            timeout=timeout,
            http_transport=http_transport,
        )

        self.repos = AsyncReposClient(self._transport)
        self.commits = AsyncCommitsClient(self._transport)
        self.branches = AsyncBranchesClient(self._transport)

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "AsyncGitHubClient":
        """Create a client from GITHUB_TOKEN, GITHUB_HOST and GITHUB_PORT."""
        return cls(
            token=os.environ.get("GITHUB_TOKEN") or None,
            host=os.environ.get("GITHUB_HOST") or None,
            port=port_from_env(os.environ.get("GITHUB_PORT")),
            timeout=timeout,
        )

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGitHubClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
