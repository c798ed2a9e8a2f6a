"""Repositories resource client."""

from typing import TYPE_CHECKING, Any

from reapclone.endpoints import Endpoint, PathParameters
from reapclone.exceptions import ApiError, NotFoundError
from reapclone.logging import get_logger
from reapclone.types.repos import AccountType, Repository

if TYPE_CHECKING:
    from reapclone.transport import HTTPTransport

logger = get_logger()

# Organisations are probed first; a user-shaped probe is the fallback.
PROBE_ORDER = (AccountType.ORGANISATION, AccountType.USER)


def parse_repository(data: dict[str, Any]) -> Repository:
    """Parse a repository listing element, keeping the SSH clone URL."""
    return Repository(
        clone_url=data["ssh_url"],
        name=data["name"],
        archived=bool(data.get("archived", False)),
    )


def owner_not_found(owner: str) -> NotFoundError:
    return NotFoundError(
        "ACCOUNT_NOT_FOUND",
        f"'{owner}' is neither a reachable organisation nor a reachable user",
    )


class ReposClient:
    """Client for repository listing and account type resolution."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def _params(self, owner: str, account_type: AccountType) -> PathParameters:
        return PathParameters(
            base_url=self.transport.base_url,
            owner=owner,
            account_type=account_type,
        )

    def list_all(
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
        return self.transport.fetch_all(
            Endpoint.LIST_REPOSITORIES,
            self._params(owner, account_type),
            parse_repository,
            max_pages=max_pages,
        )

    def list(
        self,
        owner: str,
        account_type: AccountType,
        page: int = 1,
        per_page: int = 30,
    ) -> list[Repository]:
        """
        List one page of an owner's repositories.

        Args:
            owner: User or organisation login
            account_type: Whether owner is a user or an organisation
            page: 1-based page number
            per_page: Page size

        Returns:
            Repositories on that page

        Raises:
            NotFoundError: If the owner does not exist as that account type
            UnauthorizedError: If the token is rejected
        """
        return self.transport.fetch_page(
            Endpoint.LIST_REPOSITORIES,
            self._params(owner, account_type),
            parse_repository,
            page=page,
            per_page=per_page,
        )

    def probe_account_type(self, owner: str) -> AccountType | None:
        """
        Probe the organisation-shaped, then the user-shaped, listing endpoint.

        A successful first page (even an empty one) decides the type.

        Returns:
            The account type, or None if neither probe succeeded
        """
        for account_type in PROBE_ORDER:
            try:
                self.list(owner, account_type)
            except ApiError as e:
                logger.debug("probe %s/%s failed: %s", account_type.value, owner, e)
                continue
            return account_type
        return None

    def resolve_account_type(self, owner: str) -> AccountType:
        """
        Determine whether an owner is an organisation or a user.

        Raises:
            NotFoundError: If neither probe succeeded
        """
        account_type = self.probe_account_type(owner)
        if account_type is None:
            raise owner_not_found(owner)
        logger.info("%s resolved as %s", owner, account_type.name.lower())
        return account_type
