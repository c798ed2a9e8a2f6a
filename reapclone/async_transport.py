"""
Async HTTP Transport for reapclone.

Same contract as HTTPTransport, using the httpx async client. Pagination is
still strictly sequential: one outstanding page request at a time.
"""

import time
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from reapclone.endpoints import Endpoint, PathParameters, build_url
from reapclone.exceptions import TransportError
from reapclone.logging import log_http_request, log_http_response
from reapclone.transport import (
    DEFAULT_MAX_PAGES,
    DEFAULT_PER_PAGE,
    build_headers,
    parse_page,
    raise_for_status,
)

T = TypeVar("T")


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for listing endpoints.

    Handles:
    - Endpoint routing and page/per_page query parameters
    - Authorization and User-Agent headers
    - Status code classification into typed exceptions
    - Sequential pagination until an empty page or a page ceiling
    """

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        token: str | None = None,
        timeout: float = 30.0,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            user_agent: User-Agent header value identifying the tool
            token: Optional personal access token
            timeout: Request timeout in seconds
            http_transport: Optional httpx async transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers=build_headers(user_agent, token),
            transport=http_transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def fetch_page(
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
            ApiError: On any HTTP or decoding failure
        """
        url = build_url(endpoint, params)
        query = {"page": page, "per_page": per_page}

        log_http_request("GET", url, headers=dict(self._client.headers), params=query)
        started = time.perf_counter()
        try:
            response = await self._client.get(url, params=query)
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

    async def fetch_all(
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
        """
        limit = DEFAULT_MAX_PAGES if max_pages is None else max_pages
        items: list[T] = []

        for page in range(1, limit + 1):
            batch = await self.fetch_page(
                endpoint, params, parse, page=page, per_page=per_page
            )
            if not batch:
                break
            items.extend(batch)

        return items
