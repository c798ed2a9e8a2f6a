"""Async Repositories resource client."""

from typing import TYPE_CHECKING

from reapclone.clients.repos import PROBE_ORDER, owner_not_found, parse_repository
from reapclone.endpoints import Endpoint, PathParameters
from reapclone.exceptions import ApiError
from reapclone.logging import get_logger
from reapclone.types.repos import AccountType, Repository

if TYPE_CHECKING:
    from reapclone.async_transport import AsyncHTTPTransport

logger = get_logger()


class AsyncReposClient:
    """Async client for repository listing and account type resolution."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repos client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    def _params(self, owner: str, account_type: AccountType) -> PathParameters:
        return PathParameters(
            base_url=self.transport.base_url,
            owner=owner,
            account_type=account_type,
        )

    async def list_all(
        self,
        owner: str,
        account_type: AccountType,
        max_pages: int | None = None,
    ) -> list[Repository]:
        """
        List every repository of an owner, walking pages in order.

        Args:
            owner: User or organisation login
            account_type: Whether owner is a user or an organisation
            max_pages: Optional page ceiling

        Returns:
            All repositories, in API order
        """
        return await self.transport.fetch_all(
            Endpoint.LIST_REPOSITORIES,
            self._params(owner, account_type),
            parse_repository,
            max_pages=max_pages,
        )

    async def list(
        self,
        owner: str,
        account_type: AccountType,
        page: int = 1,
        per_page: int = 30,
    ) -> list[Repository]:
        """List one page of an owner's repositories."""
        return await self.transport.fetch_page(
            Endpoint.LIST_REPOSITORIES,
            self._params(owner, account_type),
            parse_repository,
            page=page,
            per_page=per_page,
        )

    async def probe_account_type(self, owner: str) -> AccountType | None:
        """Probe the organisation-shaped, then the user-shaped, listing endpoint."""
        for account_type in PROBE_ORDER:
            try:
                await self.list(owner, account_type)
            except ApiError as e:
                logger.debug("probe %s/%s failed: %s", account_type.value, owner, e)
                continue
            return account_type
        return None

    async def resolve_account_type(self, owner: str) -> AccountType:
        """
        Determine whether an owner is an organisation or a user.

        Raises:
            NotFoundError: If neither probe succeeded
        """
        account_type = await self.probe_account_type(owner)
        if account_type is None:
            raise owner_not_found(owner)
        logger.info("%s resolved as %s", owner, account_type.name.lower())
        return account_type
