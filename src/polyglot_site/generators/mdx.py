"""
Standalone MDX pages.

Each MDX file is published only in the locale it is written in (taken from the
``locale`` field, defaulting to the default locale). Alternate URLs are limited
to locales that actually have a version of the page.
"""

from __future__ import annotations

import logging

from ..nodes.store import node_fields
from ..pages.models import Page
from .common import GeneratorContext, content_slug, create_localized_pages, join_path, node_title

logger = logging.getLogger(__name__)

MDX_COMPONENT = "templates/mdx-page"


def create_mdx_pages(ctx: GeneratorContext, mdx_files: list[dict[str, object]]) -> list[Page]:
    settings = ctx.settings
    routes: dict[str, dict[str, dict[str, object]]] = {}

    for node in mdx_files:
        fields = node_fields(node)
        directory = fields.get("path")
        if not isinstance(directory, str):
            continue
        locale = fields.get("locale")
        if not isinstance(locale, str) or not settings.is_supported(locale):
            locale = settings.default_locale
        route = join_path(directory, content_slug(node, settings.locales))
        variants = routes.setdefault(route, {})
        if locale in variants:
            logger.warning(f"Duplicate {locale} MDX source for {route}, keeping the first")
            continue
        variants[locale] = node

    created: list[Page] = []
    for route, variants in routes.items():
        available = [locale for locale in settings.locales if locale in variants]

        def context_for(locale: str, variants: dict[str, dict[str, object]] = variants) -> dict[str, object]:
            node = variants[locale]
            return {"id": node.get("id"), "title": node_title(node)}

        created.extend(
            create_localized_pages(ctx, route, MDX_COMPONENT, context_for, available)
        )

    logger.info(f"Created {len(created)} MDX page(s)")
    return created
