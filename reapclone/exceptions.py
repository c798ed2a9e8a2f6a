"""reapclone exception classes."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reapclone.endpoints import Endpoint


class ReapCloneError(Exception):
    """Base exception for all reapclone errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(ReapCloneError):
    """Raised when command-line or environment configuration is invalid."""


class RoutingError(ReapCloneError):
    """Raised when a request target cannot be built. Never reaches the network."""


class MissingParameterError(RoutingError):
    """Raised when an endpoint is missing one of its required path parameters."""

    def __init__(self, endpoint: "Endpoint", field: str) -> None:
        super().__init__(
            "MISSING_PARAMETER",
            f"{endpoint.name} requires path parameter '{field}'",
        )
        self.endpoint = endpoint
        self.field = field


class ApiError(ReapCloneError):
    """Base class for errors returned while talking to the GitHub API."""

    def __init__(
        self, code: str, message: str, status_code: int | None = None
    ) -> None:
        super().__init__(code, message)
        self.status_code = status_code


class NotFoundError(ApiError):
    """Raised when a resource or account does not exist (404)."""


class UnauthorizedError(ApiError):
    """Raised on 401/403: the credential is missing, bad or insufficient."""


class TransportError(ApiError):
    """Raised on network failures, unexpected statuses and unparseable bodies."""
