"""
HTTP Transport for reapclone.

Handles paginated GET requests against the GitHub REST API, mapping HTTP
failures onto typed exceptions before any body is parsed.
"""

import time
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from reapclone.endpoints import Endpoint, PathParameters, build_url
from reapclone.exceptions import (
    ApiError,
    NotFoundError,
    TransportError,
    UnauthorizedError,
)
from reapclone.logging import log_http_request, log_http_response

T = TypeVar("T")

DEFAULT_PER_PAGE = 30
DEFAULT_MAX_PAGES = 65535
ACCEPT_HEADER = "application/vnd.github+json"

_ERROR_CODES: dict[type[ApiError], str] = {
    NotFoundError: "NOT_FOUND",
    UnauthorizedError: "UNAUTHORIZED",
    TransportError: "HTTP_ERROR",
}


def classify_status(status_code: int) -> type[ApiError] | None:
    """
    Map an HTTP status code onto the error it represents.

    Args:
        status_code: HTTP status code

    Returns:
        None for 2xx, otherwise the ApiError subclass to raise
    """
    if 200 <= status_code < 300:
        return None
    if status_code == 404:
        return NotFoundError
    if status_code in (401, 403):
        return UnauthorizedError
    return TransportError


def build_headers(user_agent: str, token: str | None = None) -> dict[str, str]:
    """
    Build the default headers sent with every request.

    GitHub rejects requests without a User-Agent, so it is always set.
    Authorization is only attached when a token is configured.
    """
    headers = {
        "Accept": ACCEPT_HEADER,
        "User-Agent": user_agent,
    }
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


def raise_for_status(response: httpx.Response, url: str) -> None:
    """Raise the typed error for a non-2xx response without reading its body."""
    error_cls = classify_status(response.status_code)
    if error_cls is None:
        return
    raise error_cls(
        _ERROR_CODES[error_cls],
        f"HTTP {response.status_code} for {url}",
        response.status_code,
    )


def parse_page(response: httpx.Response, parse: Callable[[dict[str, Any]], T]) -> list[T]:
    """
    Deserialize a successful listing response.

    An empty body or an empty JSON array is a valid, empty page.

    Raises:
        TransportError: If the body is not a JSON array or an element is malformed
    """
    if not response.content.strip():
        return []

    try:
        data = response.json()
    except ValueError as e:
        raise TransportError(
            "INVALID_BODY", f"Response body is not JSON: {e}", response.status_code
        ) from e

    if not isinstance(data, list):
        raise TransportError(
            "UNEXPECTED_BODY",
            f"Expected a JSON array, got {type(data).__name__}",
            response.status_code,
        )

    try:
        return [parse(item) for item in data]
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise TransportError(
            "UNEXPECTED_BODY",
            f"Malformed list element: {e!r}",
            response.status_code,
        ) from e


class HTTPTransport:
    """
    HTTP transport layer for listing endpoints.

    Handles:
    - Endpoint routing and page/per_page query parameters
    - Authorization and User-Agent headers
    - Status code classification into typed exceptions
    - Sequential pagination until an empty page or a page ceiling

    Configuration is fixed at construction time.
    """

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        token: str | None = None,
        timeout: float = 30.0,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            user_agent: User-Agent header value identifying the tool
            token: Optional personal access token
            timeout: Request timeout in seconds
            http_transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

        self._client = httpx.Client(
            timeout=timeout,
            headers=build_headers(user_agent, token),
            transport=http_transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def fetch_page(
        self,
        endpoint: Endpoint,
        params: PathParameters,
        parse: Callable[[dict[str, Any]], T],
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> list[T]:
        """
        Fetch a single page of a listing endpoint.

        Args:
            endpoint: The endpoint to call
            params: Path parameters for the endpoint
            parse: Converts one JSON element into the result type
            page: 1-based page number
            per_page: Page size

        Returns:
            Parsed elements of the page, possibly empty

        Raises:
            MissingParameterError: If params do not satisfy the endpoint
            NotFoundError: On 404
            UnauthorizedError: On 401 or 403
            TransportError: On network failure, other statuses or a malformed body
        """
        url = build_url(endpoint, params)
        query = {"page": page, "per_page": per_page}

        log_http_request("GET", url, headers=dict(self._client.headers), params=query)
        started = time.perf_counter()
        try:
            response = self._client.get(url, params=query)
        except httpx.RequestError as e:
            raise TransportError("CONNECTION_ERROR", str(e)) from e

        raise_for_status(response, url)
        items = parse_page(response, parse)
        log_http_response(
            response.status_code,
            url,
            item_count=len(items),
            elapsed_ms=(time.perf_counter() - started) * 1000,
        )
        return items

    def fetch_all(
        self,
        endpoint: Endpoint,
        params: PathParameters,
        parse: Callable[[dict[str, Any]], T],
        max_pages: int | None = None,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> list[T]:
        """
        Fetch every page of a listing endpoint, one page at a time.

        Stops at the first empty page or after ``max_pages`` requests. Any
        error aborts the walk; pages already fetched are discarded.

        Args:
            endpoint: The endpoint to call
            params: Path parameters for the endpoint
            parse: Converts one JSON element into the result type
            max_pages: Maximum number of pages to request (default: 65535)
            per_page: Page size

        Returns:
            All elements, in page order
        """
        limit = DEFAULT_MAX_PAGES if max_pages is None else max_pages
        items: list[T] = []

        for page in range(1, limit + 1):
            batch = self.fetch_page(endpoint, params, parse, page=page, per_page=per_page)
            if not batch:
                break
            items.extend(batch)

        return items
