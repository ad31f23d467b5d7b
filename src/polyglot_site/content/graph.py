"""
The ``graphql`` callable handed to page creation.

Local roots (``docs`` and ``mdxPages``) are resolved from the node store; the
remainder of the query is forwarded to the CMS. Results are merged into one
``QueryResult``.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..nodes.store import Node, NodeStore, node_fields, node_type
from .cms import CMSClient, QueryResult
from .fragments import LOCAL_FRAGMENTS

logger = logging.getLogger(__name__)

GraphQL = Callable[[str], Awaitable[QueryResult]]

DOCS_PREFIX = "/docs"


def _is_docs_path(path: str) -> bool:
    return path == DOCS_PREFIX or path.startswith(f"{DOCS_PREFIX}/")


def _edge(node: Node) -> dict[str, object]:
    return {
        "node": {
            "id": node.get("id"),
            "fileAbsolutePath": node.get("fileAbsolutePath"),
            "fields": dict(node_fields(node)),
            "frontmatter": dict(node.get("frontmatter") or {}),
        }
    }


def _query_body_is_empty(query: str) -> bool:
    body = query.strip()
    if body.startswith("{") and body.endswith("}"):
        body = body[1:-1]
    return not body.strip()


class ContentGraph:
    """Answers the composite page query from local nodes and the CMS."""

    def __init__(self, nodes: NodeStore, cms: CMSClient | None = None) -> None:
        self.nodes: NodeStore = nodes
        self.cms: CMSClient | None = cms
        self._resolvers: dict[str, Callable[[], dict[str, object]]] = {
            "docs": self.resolve_docs,
            "mdxPages": self.resolve_mdx_pages,
        }

    def _mdx_with_path(self) -> list[tuple[Node, str]]:
        result: list[tuple[Node, str]] = []
        for node in self.nodes:
            if node_type(node) != "Mdx":
                continue
            path = node_fields(node).get("path")
            if isinstance(path, str) and path:
                result.append((node, path))
        return result

    def resolve_docs(self) -> dict[str, object]:
        return {
            "edges": [
                _edge(node) for node, path in self._mdx_with_path() if _is_docs_path(path)
            ]
        }

    def resolve_mdx_pages(self) -> dict[str, object]:
        return {
            "edges": [
                _edge(node) for node, path in self._mdx_with_path() if not _is_docs_path(path)
            ]
        }

    async def __call__(self, query: str) -> QueryResult:
        data: dict[str, object] = {}
        remaining = query

        for root, fragment in LOCAL_FRAGMENTS.items():
            if fragment in remaining:
                data[root] = self._resolvers[root]()
                remaining = remaining.replace(fragment, "")

        result = QueryResult(data=data)
        if _query_body_is_empty(remaining):
            return result

        if self.cms is None:
            result["errors"] = [
                {"message": "Query requires CMS data but no CMS endpoint is configured"}
            ]
            return result

        cms_result = await self.cms.execute(remaining)
        data.update(cms_result.get("data", {}))
        if cms_result.get("errors"):
            result["errors"] = list(cms_result["errors"])
        return result
