"""
Endpoint routing for the GitHub REST API.

Maps a listing endpoint plus its path parameters to a request URL. Pure and
side-effect free: a missing parameter raises before anything touches the
network.
"""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

from reapclone.exceptions import MissingParameterError
from reapclone.types.repos import AccountType

DEFAULT_API_HOST = "api.github.com"
ENTERPRISE_PATH_PREFIX = "/api/v3"


class Endpoint(Enum):
    """Listing-shaped API endpoints."""

    LIST_REPOSITORIES = "repos"
    LIST_COMMITS = "commits"
    LIST_BRANCHES = "branches"

    @property
    def required_fields(self) -> tuple[str, ...]:
        """Names of the PathParameters fields this endpoint cannot do without."""
        return _REQUIRED_FIELDS[self]


_REQUIRED_FIELDS: dict[Endpoint, tuple[str, ...]] = {
    Endpoint.LIST_REPOSITORIES: ("account_type", "owner"),
    Endpoint.LIST_COMMITS: ("owner", "repo"),
    Endpoint.LIST_BRANCHES: ("owner", "repo"),
}


@dataclass(frozen=True)
class PathParameters:
    """Values substituted into an endpoint's path template."""

    base_url: str
    owner: str | None = None
    repo: str | None = None
    account_type: AccountType | None = None


def build_base_url(host: str | None = None, port: int | str | None = None) -> str:
    """
    Build the API base URL.

    With no host this is the public API. Any other host is treated as a
    GitHub Enterprise server, whose REST API lives under ``/api/v3``.

    Args:
        host: Enterprise host name (default: public GitHub)
        port: Optional port for the host

    Returns:
        Base URL without a trailing slash
    """
    if host is None:
        return f"https://{DEFAULT_API_HOST}"

    host = host.rstrip("/")
    if "://" in host:
        host = host.split("://", 1)[1]
    netloc = f"{host}:{port}" if port else host
    return f"https://{netloc}{ENTERPRISE_PATH_PREFIX}"


def build_url(endpoint: Endpoint, params: PathParameters) -> str:
    """
    Build the URL for a listing endpoint.

    Args:
        endpoint: The endpoint to call
        params: Path parameters for the request

    Returns:
        Absolute URL, without query string

    Raises:
        MissingParameterError: If a parameter the endpoint requires is None
    """
    for name in endpoint.required_fields:
        if getattr(params, name) is None:
            raise MissingParameterError(endpoint, name)

    base_url = params.base_url.rstrip("/")
    # Names are single path segments; "/", "?" and "#" must not change the target.
    owner = quote(params.owner, safe="")

    if endpoint is Endpoint.LIST_REPOSITORIES:
        return f"{base_url}/{params.account_type.value}/{owner}/repos"

    repo = quote(params.repo, safe="")
    if endpoint is Endpoint.LIST_COMMITS:
        return f"{base_url}/repos/{owner}/{repo}/commits"
    return f"{base_url}/repos/{owner}/{repo}/branches"
