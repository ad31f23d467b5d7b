"""
Documentation pages.

Docs pages are created without a locale. Locale fan-out turns each into one
page per locale; translated source files (``setup.fr.mdx``) are listed in
``context.translations`` so the template can pick the right body.
"""

from __future__ import annotations

import logging

from ..nodes.store import node_fields
from ..pages.models import Page
from .common import GeneratorContext, content_slug, join_path, node_title

logger = logging.getLogger(__name__)

DOCS_COMPONENT = "templates/docs-page"


def create_docs_pages(ctx: GeneratorContext, docs: list[dict[str, object]]) -> list[Page]:
    """Create one locale-less page per documentation route."""
    settings = ctx.settings
    groups: dict[str, list[dict[str, object]]] = {}

    for node in docs:
        directory = node_fields(node).get("path")
        if not isinstance(directory, str):
            logger.debug(f"Skipping docs node {node.get('id')} without a path field")
            continue
        route = join_path(directory, content_slug(node, settings.locales))
        groups.setdefault(route, []).append(node)

    created: list[Page] = []
    for route, nodes in groups.items():
        primary = next(
            (
                node
                for node in nodes
                if node_fields(node).get("locale") in (None, settings.default_locale)
            ),
            nodes[0],
        )
        translations = {
            str(node_fields(node)["locale"]): node.get("id")
            for node in nodes
            if node is not primary and node_fields(node).get("locale")
        }
        page = Page(
            path=route,
            component=DOCS_COMPONENT,
            context={
                "id": primary.get("id"),
                "title": node_title(primary),
                "translations": translations,
            },
        )
        ctx.actions.create_page(page)
        created.append(page)

    logger.info(f"Created {len(created)} docs page(s)")
    return created
