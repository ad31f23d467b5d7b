"""
Content node store.

Nodes are plain mappings shaped like the content graph exposes them::

    {
        "id": "...",
        "internal": {"type": "Mdx"},
        "fileAbsolutePath": "/site/src/content/docs/intro.mdx",
        "frontmatter": {...},
        "body": "...",
        "fields": {"locale": "fr", "path": "/docs"},
    }

``fields`` is owned by the store and only written through ``create_node_field``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)

Node = dict[str, object]


def node_type(node: Node) -> str | None:
    """The ``internal.type`` of a node, if present."""
    internal = node.get("internal")
    if isinstance(internal, dict):
        value = internal.get("type")
        if isinstance(value, str):
            return value
    return None


def node_fields(node: Node) -> dict[str, object]:
    """The derived fields of a node (empty if none were created)."""
    fields = node.get("fields")
    return fields if isinstance(fields, dict) else {}


class NodeStore:
    """Nodes keyed by id, in creation order."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}

    def create_node(self, node: Node) -> Node:
        node_id = node.get("id")
        if not isinstance(node_id, str) or not node_id:
            raise ValueError("Node must have a non-empty string 'id'")
        self._nodes[node_id] = node
        return node

    def create_node_field(self, node: Node, name: str, value: object) -> None:
        """Attach a derived field to ``node``."""
        fields = node.get("fields")
        if not isinstance(fields, dict):
            fields = {}
            node["fields"] = fields
        fields[name] = value
        logger.debug(f"Node {node.get('id')}: fields.{name} = {value!r}")

    def get(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def of_type(self, type_name: str) -> list[Node]:
        return [node for node in self._nodes.values() if node_type(node) == type_name]

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes.values()))

    def __len__(self) -> int:
        return len(self._nodes)
