"""Build lifecycle interface: one method per hook, called in build order."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..content.graph import GraphQL
from ..nodes.store import Node
from ..pages.models import Page
from .actions import Actions


@runtime_checkable
class BuildLifecycle(Protocol):
    """Hooks invoked by a build pass."""

    def on_pre_bootstrap(self) -> None:
        """Runs once before anything else; blocks until complete."""
        ...

    def on_create_node(self, node: Node, actions: Actions) -> None:
        """Runs for every content node as it is sourced."""
        ...

    def on_create_webpack_config(self, actions: Actions) -> None: ...

    async def create_pages(self, graphql: GraphQL, actions: Actions) -> None:
        """Runs once after sourcing; creates every generated page."""
        ...

    def on_create_page(self, page: Page, actions: Actions) -> None:
        """Runs for every page as it is created."""
        ...
