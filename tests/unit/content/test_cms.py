"""Tests for the CMS GraphQL client using an httpx mock transport."""

from __future__ import annotations

import json

import httpx
import pytest

from src.polyglot_site.content.cms import CMSClient
from src.polyglot_site.utils.core.exceptions import QueryError

CMS_URL = "https://graphql.example.com/content/v1/spaces/abc"


def transport_returning(
    response: httpx.Response, seen: list[httpx.Request] | None = None
) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return response

    return httpx.MockTransport(handler)


class TestCMSClient:
    """Test cases for CMSClient."""

    @pytest.mark.asyncio
    async def test_execute_posts_query(self) -> None:
        seen: list[httpx.Request] = []
        transport = transport_returning(
            httpx.Response(200, json={"data": {"allContentfulBlogPost": {"edges": []}}}),
            seen,
        )

        async with CMSClient(CMS_URL, access_token="secret", transport=transport) as client:
            result = await client.execute("{ allContentfulBlogPost { edges { node { slug } } } }")

        assert result == {"data": {"allContentfulBlogPost": {"edges": []}}}
        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == CMS_URL
        assert request.headers["Authorization"] == "Bearer secret"
        assert json.loads(request.content) == {
            "query": "{ allContentfulBlogPost { edges { node { slug } } } }"
        }

    @pytest.mark.asyncio
    async def test_execute_sends_variables(self) -> None:
        seen: list[httpx.Request] = []
        transport = transport_returning(httpx.Response(200, json={"data": {}}), seen)

        async with CMSClient(CMS_URL, transport=transport) as client:
            _ = await client.execute("query($l: String) { x }", {"l": "fr-FR"})

        assert json.loads(seen[0].content)["variables"] == {"l": "fr-FR"}
        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_graphql_errors_returned(self) -> None:
        transport = transport_returning(
            httpx.Response(200, json={"data": None, "errors": [{"message": "Unknown field"}]})
        )

        async with CMSClient(CMS_URL, transport=transport) as client:
            result = await client.execute("{ nope }")

        assert result == {"errors": [{"message": "Unknown field"}]}

    @pytest.mark.asyncio
    async def test_http_error_raises_query_error(self) -> None:
        transport = transport_returning(httpx.Response(401, text="unauthorized"))

        async with CMSClient(CMS_URL, transport=transport) as client:
            with pytest.raises(QueryError, match="HTTP 401") as exc_info:
                _ = await client.execute("{ x }")

        assert exc_info.value.context == "unauthorized"

    @pytest.mark.asyncio
    async def test_transport_error_raises_query_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with CMSClient(CMS_URL, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(QueryError, match="failed"):
                _ = await client.execute("{ x }")

    @pytest.mark.asyncio
    async def test_invalid_json_raises_query_error(self) -> None:
        transport = transport_returning(httpx.Response(200, text="<html>"))

        async with CMSClient(CMS_URL, transport=transport) as client:
            with pytest.raises(QueryError, match="invalid JSON"):
                _ = await client.execute("{ x }")

    @pytest.mark.asyncio
    async def test_non_object_payload_raises_query_error(self) -> None:
        transport = transport_returning(httpx.Response(200, json=[1, 2]))

        async with CMSClient(CMS_URL, transport=transport) as client:
            with pytest.raises(QueryError, match="expected object"):
                _ = await client.execute("{ x }")

    @pytest.mark.asyncio
    async def test_execute_outside_context(self) -> None:
        client = CMSClient(CMS_URL)

        with pytest.raises(RuntimeError, match="async context manager"):
            _ = await client.execute("{ x }")

    @pytest.mark.asyncio
    async def test_client_closed_on_exit(self) -> None:
        client = CMSClient(CMS_URL + "/", transport=transport_returning(httpx.Response(200)))

        async with client:
            assert client._client is not None

        assert client._client is None
        assert client.url == CMS_URL
