"""
Site build orchestrator.

``SiteBuild`` implements every lifecycle hook and runs one sequential build
pass: catalogs are compiled and loaded first, local content is sourced and
tagged, the bundler config is registered, then the page query creates pages.
Every created page passes through locale fan-out.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

import httpx

from ..config.schema import SiteConfig
from ..content.cms import CMSClient
from ..content.dispatcher import PageQueryDispatcher
from ..content.graph import ContentGraph, GraphQL
from ..content.local import LocalContentSource
from ..i18n.catalogs import CatalogPreloader, Catalogs
from ..i18n.locales import LocaleSettings
from ..nodes.store import Node
from ..nodes.tagger import NodeFieldTagger
from ..pages.fanout import LocaleFanOut
from ..pages.models import Page
from .actions import Actions, BuildActions

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a build pass."""

    pages: list[Page]
    webpack_config: dict[str, object]
    locales: tuple[str, ...]
    node_count: int = 0
    catalog_locales: list[str] = field(default_factory=list)


class SiteBuild:
    """Implements the build lifecycle for one site configuration."""

    def __init__(
        self,
        config: SiteConfig,
        base_dir: Path | None = None,
        actions: BuildActions | None = None,
        preloader: CatalogPreloader | None = None,
        cms_transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.config: SiteConfig = config
        self.base_dir: Path = base_dir if base_dir is not None else Path.cwd()
        self.settings: LocaleSettings = LocaleSettings.from_config(config.i18n)
        self.actions: BuildActions = actions if actions is not None else BuildActions()
        self.tagger: NodeFieldTagger = NodeFieldTagger(
            self.settings, config.content.source_root
        )
        self.fanout: LocaleFanOut = LocaleFanOut(self.settings, clock)
        self.dispatcher: PageQueryDispatcher = PageQueryDispatcher(
            self.settings, config.features, clock
        )
        self.preloader: CatalogPreloader = (
            preloader
            if preloader is not None
            else CatalogPreloader(config.catalogs, self.settings, self.base_dir)
        )
        self.catalogs: Catalogs | None = None
        self._cms_transport: httpx.AsyncBaseTransport | None = cms_transport

        self.actions.pages.add_listener(
            lambda page: self.on_create_page(page, self.actions)
        )

    # Lifecycle hooks

    def on_pre_bootstrap(self) -> None:
        self.catalogs = self.preloader.preload()

    def on_create_node(self, node: Node, actions: Actions) -> None:
        self.tagger.on_create_node(node, actions)

    def on_create_webpack_config(self, actions: Actions) -> None:
        actions.set_webpack_config(
            {"resolve": {"modules": list(self.config.bundler.resolve_modules)}}
        )

    async def create_pages(self, graphql: GraphQL, actions: Actions) -> None:
        if self.catalogs is None:
            raise RuntimeError("Catalogs are not loaded; on_pre_bootstrap must run first")
        await self.dispatcher.create_pages(graphql, actions, self.catalogs)

    def on_create_page(self, page: Page, actions: Actions) -> None:
        self.fanout.on_create_page(page, actions)

    # Build pass

    def source_nodes(self, nodes: Iterable[Node]) -> int:
        """Register and tag nodes; returns how many were sourced."""
        count = 0
        for node in nodes:
            _ = self.actions.nodes.create_node(node)
            self.on_create_node(node, self.actions)
            count += 1
        return count

    def _content_dir(self) -> Path:
        content_dir = Path(self.config.content.content_dir)
        return content_dir if content_dir.is_absolute() else self.base_dir / content_dir

    async def run(self) -> BuildResult:
        """Run one complete build pass."""
        logger.info(
            f"Building site for locales: {', '.join(self.settings.locales)}"
        )
        self.on_pre_bootstrap()

        source = LocalContentSource(self._content_dir(), self.config.content.extensions)
        node_count = self.source_nodes(source)
        logger.info(f"Sourced {node_count} node(s)")

        self.on_create_webpack_config(self.actions)

        cms_config = self.config.cms
        if cms_config.url:
            async with CMSClient(
                cms_config.url,
                access_token=cms_config.access_token,
                timeout=cms_config.timeout,
                transport=self._cms_transport,
            ) as cms:
                await self.create_pages(ContentGraph(self.actions.nodes, cms), self.actions)
        else:
            await self.create_pages(ContentGraph(self.actions.nodes), self.actions)

        pages = self.actions.pages.pages
        logger.info(f"Build produced {len(pages)} page(s)")
        return BuildResult(
            pages=pages,
            webpack_config=self.actions.webpack_config,
            locales=self.settings.locales,
            node_count=node_count,
            catalog_locales=list(self.catalogs or {}),
        )
