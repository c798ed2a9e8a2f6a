"""
reapclone main client.

Provides the primary interface for listing a GitHub owner's repositories,
commits and branches.
"""

import os
from typing import Any

import httpx

from reapclone.clients import BranchesClient, CommitsClient, ReposClient
from reapclone.endpoints import build_base_url
from reapclone.exceptions import ConfigurationError
from reapclone.transport import HTTPTransport
from reapclone.version import USER_AGENT


def port_from_env(value: str | None) -> int | None:
    """Parse GITHUB_PORT, raising ConfigurationError on garbage."""
    if not value:
        return None
    try:
        port = int(value)
    except ValueError:
        raise ConfigurationError(
            "INVALID_PORT", f"GITHUB_PORT must be an integer, got {value!r}"
        ) from None
    if not 0 < port < 65536:
        raise ConfigurationError("INVALID_PORT", f"GITHUB_PORT out of range: {port}")
    return port


class GitHubClient:
    """
    Main client for interacting with the GitHub REST API.

    Aggregates the resource clients over one shared transport.

    Example:
        ```python
        from reapclone import GitHubClient

        with GitHubClient(token="ghp_...") as client:
            account_type = client.repos.resolve_account_type("octo-org")
            repos = client.repos.list_all("octo-org", account_type)
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
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: Optional personal access token; without one only public
                repositories are visible
            host: GitHub Enterprise host (default: public GitHub)
            port: Optional port for the enterprise host
            user_agent: User-Agent header value
            timeout: Request timeout in seconds (default: 30.0)
            http_transport: Optional httpx transport (used by tests)
        """
        self.base_url = build_base_url(host, port)
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=self.base_url,
            user_agent=user_agent,
            token=token,
            timeout=timeout,
            http_transport=http_transport,
        )

        self.repos = ReposClient(self._transport)
        self.commits = CommitsClient(self._transport)
        self.branches = BranchesClient(self._transport)

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "GitHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: Personal access token (optional)
            GITHUB_HOST: GitHub Enterprise host (optional)
            GITHUB_PORT: Port for the enterprise host (optional)

        Raises:
            ConfigurationError: If GITHUB_PORT is not a valid port
        """
        return cls(
            token=os.environ.get("GITHUB_TOKEN") or None,
            host=os.environ.get("GITHUB_HOST") or None,
            port=port_from_env(os.environ.get("GITHUB_PORT")),
            timeout=timeout,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
