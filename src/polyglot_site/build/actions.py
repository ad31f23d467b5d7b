"""
Action surface handed to lifecycle hooks.

Hooks never touch the page registry or node store directly; they receive an
``Actions`` object and mutate the build through it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from ..nodes.store import Node, NodeStore
from ..pages.models import Page
from ..pages.registry import PageRegistry

logger = logging.getLogger(__name__)


class Actions(Protocol):
    """Build mutations available to lifecycle hooks."""

    def create_page(self, page: Page) -> None: ...

    def delete_page(self, page: Page) -> None: ...

    def create_node_field(self, node: Node, name: str, value: object) -> None: ...

    def set_webpack_config(self, config: Mapping[str, object]) -> None: ...


def merge_config(base: dict[str, object], update: Mapping[str, object]) -> dict[str, object]:
    """Deep-merge ``update`` into ``base``; lists and scalars in ``update`` win."""
    for key, value in update.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            base[key] = merge_config(current, value)
        elif isinstance(value, Mapping):
            base[key] = merge_config({}, value)
        else:
            base[key] = value
    return base


class BuildActions:
    """``Actions`` backed by a page registry, a node store and a bundler config."""

    def __init__(
        self,
        pages: PageRegistry | None = None,
        nodes: NodeStore | None = None,
    ) -> None:
        self.pages: PageRegistry = pages if pages is not None else PageRegistry()
        self.nodes: NodeStore = nodes if nodes is not None else NodeStore()
        self.webpack_config: dict[str, object] = {}

    def create_page(self, page: Page) -> None:
        self.pages.create_page(page)

    def delete_page(self, page: Page) -> None:
        self.pages.delete_page(page)

    def create_node_field(self, node: Node, name: str, value: object) -> None:
        self.nodes.create_node_field(node, name, value)

    def set_webpack_config(self, config: Mapping[str, object]) -> None:
        _ = merge_config(self.webpack_config, config)
        logger.debug(f"Webpack config updated: {self.webpack_config}")
