"""Tests for the composite page query and the content graph."""

from __future__ import annotations

import json

import httpx
import pytest

from src.polyglot_site.config.schema import FeatureFlagsConfig
from src.polyglot_site.content.cms import CMSClient
from src.polyglot_site.content.fragments import (
    BLOG_FRAGMENT,
    DOCS_FRAGMENT,
    MDX_PAGES_FRAGMENT,
    PROJECTS_FRAGMENT,
    build_page_query,
    build_query,
    enabled_fragments,
)
from src.polyglot_site.content.graph import ContentGraph
from src.polyglot_site.nodes.store import Node, NodeStore


def tagged_node(node_id: str, path: str, locale: str | None = None) -> Node:
    fields: dict[str, object] = {"path": path}
    if locale:
        fields["locale"] = locale
    return {
        "id": node_id,
        "internal": {"type": "Mdx"},
        "fileAbsolutePath": f"/site/src/content{path}/{node_id}.mdx",
        "frontmatter": {"title": node_id.title()},
        "fields": fields,
    }


@pytest.fixture
def store() -> NodeStore:
    store = NodeStore()
    _ = store.create_node(tagged_node("intro", "/docs"))
    _ = store.create_node(tagged_node("setup", "/docs/guides", "fr"))
    _ = store.create_node(tagged_node("about", "/"))
    _ = store.create_node(tagged_node("docsy", "/docsy"))
    _ = store.create_node({"id": "untagged", "internal": {"type": "Mdx"}})
    return store


class TestFragments:
    def test_docs_only_by_default(self) -> None:
        assert enabled_fragments(FeatureFlagsConfig()) == [DOCS_FRAGMENT]

    def test_dispatch_order(self) -> None:
        features = FeatureFlagsConfig(mdx_pages=True, blog=True, projects=True)

        assert enabled_fragments(features) == [
            MDX_PAGES_FRAGMENT,
            BLOG_FRAGMENT,
            PROJECTS_FRAGMENT,
            DOCS_FRAGMENT,
        ]

    def test_build_query_wraps_fragments(self) -> None:
        query = build_query([DOCS_FRAGMENT])

        assert query.startswith("{\n")
        assert query.endswith("}\n")
        assert DOCS_FRAGMENT in query

    def test_nothing_enabled(self) -> None:
        features = FeatureFlagsConfig(docs=False)

        assert build_page_query(features) == "{\n}\n"


class TestContentGraph:
    """Test cases for ContentGraph."""

    def test_resolve_docs(self, store: NodeStore) -> None:
        edges = ContentGraph(store).resolve_docs()["edges"]

        assert isinstance(edges, list)
        assert [edge["node"]["id"] for edge in edges] == ["intro", "setup"]
        assert edges[1]["node"]["fields"] == {"path": "/docs/guides", "locale": "fr"}

    def test_resolve_mdx_pages(self, store: NodeStore) -> None:
        edges = ContentGraph(store).resolve_mdx_pages()["edges"]

        assert isinstance(edges, list)
        assert [edge["node"]["id"] for edge in edges] == ["about", "docsy"]

    @pytest.mark.asyncio
    async def test_local_query(self, store: NodeStore) -> None:
        graph = ContentGraph(store)

        result = await graph(build_page_query(FeatureFlagsConfig(mdx_pages=True)))

        assert "errors" not in result
        assert set(result["data"]) == {"docs", "mdxPages"}

    @pytest.mark.asyncio
    async def test_cms_query_without_cms(self, store: NodeStore) -> None:
        graph = ContentGraph(store)

        result = await graph(build_query([BLOG_FRAGMENT, DOCS_FRAGMENT]))

        assert "docs" in result["data"]
        assert result["errors"] == [
            {"message": "Query requires CMS data but no CMS endpoint is configured"}
        ]

    @pytest.mark.asyncio
    async def test_cms_roots_forwarded_and_merged(self, store: NodeStore) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json={"data": {"allContentfulBlogPost": {"edges": []}}}
            )

        async with CMSClient(
            "https://cms.example.com/graphql", transport=httpx.MockTransport(handler)
        ) as cms:
            result = await ContentGraph(store, cms)(build_query([BLOG_FRAGMENT, DOCS_FRAGMENT]))

        assert set(result["data"]) == {"docs", "allContentfulBlogPost"}
        forwarded = json.loads(seen[0].content)["query"]
        assert "allContentfulBlogPost" in forwarded
        assert "allMdx" not in forwarded

    @pytest.mark.asyncio
    async def test_cms_errors_propagated(self, store: NodeStore) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"errors": [{"message": "bad field"}]})

        async with CMSClient(
            "https://cms.example.com/graphql", transport=httpx.MockTransport(handler)
        ) as cms:
            result = await ContentGraph(store, cms)(build_query([BLOG_FRAGMENT]))

        assert result["errors"] == [{"message": "bad field"}]
