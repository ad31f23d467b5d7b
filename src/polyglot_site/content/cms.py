"""
GraphQL client for the headless CMS.

This module provides an async HTTP client that posts GraphQL queries to the
CMS endpoint and returns the decoded ``{data, errors}`` payload. There is no
retry: a transport failure fails the build.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypedDict, cast

import httpx

from ..utils.core.exceptions import QueryError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


class QueryResult(TypedDict, total=False):
    """GraphQL response payload."""

    data: dict[str, object]
    errors: list[object]


class CMSClient:
    """Async GraphQL client for the CMS endpoint."""

    def __init__(
        self,
        url: str,
        access_token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize CMSClient with connection parameters."""
        self.url: str = url.rstrip("/")
        self.access_token: str | None = access_token
        self.timeout: float = timeout
        self._transport: httpx.AsyncBaseTransport | None = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> CMSClient:
        """Enter async context and initialize HTTP client."""
        headers = {"Content-Type": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            headers=headers,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context and cleanup HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def execute(
        self, query: str, variables: dict[str, object] | None = None
    ) -> QueryResult:
        """
        Post a GraphQL query.

        Returns:
            The decoded payload; GraphQL-level errors are left in ``errors``

        Raises:
            RuntimeError: If the client is used outside its async context
            QueryError: On transport failures, HTTP errors or malformed payloads
        """
        if self._client is None:
            raise RuntimeError("CMSClient not initialized. Use as async context manager.")

        payload: dict[str, object] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = await self._client.post(self.url, json=payload)
            _ = response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise QueryError(
                f"CMS returned HTTP {e.response.status_code} for {self.url}",
                context=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise QueryError(f"CMS request to {self.url} failed: {e}") from e

        try:
            body: object = response.json()
        except ValueError as e:
            raise QueryError(f"CMS returned invalid JSON: {e}") from e

        if not isinstance(body, dict):
            raise QueryError("Invalid CMS response format: expected object")

        body_dict = cast(dict[str, object], body)
        result = QueryResult()
        data = body_dict.get("data")
        if isinstance(data, dict):
            result["data"] = cast(dict[str, object], data)
        errors = body_dict.get("errors")
        if isinstance(errors, list) and errors:
            result["errors"] = cast(list[object], errors)

        logger.debug(f"CMS query returned {len(result.get('data', {}))} root field(s)")
        return result
