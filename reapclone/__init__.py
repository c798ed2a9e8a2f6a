"""reapclone - clone every repository of a GitHub user or organisation."""

from reapclone.async_client import AsyncGitHubClient
from reapclone.client import GitHubClient
from reapclone.endpoints import Endpoint, PathParameters, build_base_url, build_url
from reapclone.exceptions import (
    ApiError,
    ConfigurationError,
    MissingParameterError,
    NotFoundError,
    ReapCloneError,
    RoutingError,
    TransportError,
    UnauthorizedError,
)
from reapclone.git import CloneDispatcher, clone_repository
from reapclone.logging import configure_logging, get_logger
from reapclone.transport import HTTPTransport, classify_status
from reapclone.types import (
    AccountType,
    Branch,
    CloneOutcome,
    CloneReport,
    Commit,
    Repository,
)
from reapclone.version import USER_AGENT, __version__

__all__ = [
    "__version__",
    "USER_AGENT",
    # Main Clients
    "GitHubClient",
    "AsyncGitHubClient",
    # Routing
    "Endpoint",
    "PathParameters",
    "build_url",
    "build_base_url",
    # Transport
    "HTTPTransport",
    "classify_status",
    # Cloning
    "CloneDispatcher",
    "clone_repository",
    # Types
    "AccountType",
    "Repository",
    "Commit",
    "Branch",
    "CloneOutcome",
    "CloneReport",
    # Exceptions
    "ReapCloneError",
    "ConfigurationError",
    "RoutingError",
    "MissingParameterError",
    "ApiError",
    "NotFoundError",
    "UnauthorizedError",
    "TransportError",
    # Logging
    "configure_logging",
    "get_logger",
]
