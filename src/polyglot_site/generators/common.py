"""Shared helpers for page generators."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from slugify import slugify

from ..i18n.catalogs import Catalogs
from ..i18n.locales import LocaleSettings
from ..pages.fanout import localize_page
from ..pages.models import Page

if TYPE_CHECKING:
    from ..build.actions import Actions

logger = logging.getLogger(__name__)


@dataclass
class GeneratorContext:
    """Everything a page generator needs, passed explicitly."""

    actions: Actions
    settings: LocaleSettings
    catalogs: Catalogs
    last_modified: str


def unique_slugs(names: Iterable[str], fallback: str = "category") -> dict[str, str]:
    """
    Route slug for each of ``names``, distinct from every other one.

    Names are slugged in order. A name with nothing left after slugging uses
    ``fallback``; a slug that is already taken gets a ``-2``, ``-3``... suffix.
    """
    assigned: dict[str, str] = {}
    taken: set[str] = set()
    for name in names:
        if name in assigned:
            continue
        natural = slugify(name)
        base = natural or fallback
        slug = base
        counter = 2
        while slug in taken:
            slug = f"{base}-{counter}"
            counter += 1
        if slug != natural:
            logger.warning(f"Slug {natural!r} for {name!r} unavailable, using {slug!r}")
        taken.add(slug)
        assigned[name] = slug
    return assigned


def join_path(*segments: str) -> str:
    """Join route segments into ``/a/b/`` form."""
    parts = [part.strip("/") for part in segments if part and part.strip("/")]
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"


def content_slug(node: dict[str, object], locale_suffixes: Iterable[str] = ()) -> str:
    """
    Slug of a content node.

    Front matter ``slug`` wins; otherwise the file stem with any locale suffix
    removed. ``index`` files have an empty slug.
    """
    frontmatter = node.get("frontmatter")
    if isinstance(frontmatter, dict):
        slug = frontmatter.get("slug")
        if isinstance(slug, str) and slug.strip("/"):
            return slug.strip("/")

    file_path = node.get("fileAbsolutePath")
    if not isinstance(file_path, str) or not file_path:
        return ""

    stem = PurePosixPath(file_path).stem
    base, dot, suffix = stem.rpartition(".")
    if dot and suffix in set(locale_suffixes):
        stem = base
    return "" if stem == "index" else stem


def node_title(node: dict[str, object]) -> str | None:
    frontmatter = node.get("frontmatter")
    if isinstance(frontmatter, dict):
        title = frontmatter.get("title")
        if isinstance(title, str):
            return title
    return None


def edge_nodes(result_set: object) -> list[dict[str, object]]:
    """The ``node`` of every edge in a connection, skipping malformed edges."""
    if not isinstance(result_set, dict):
        return []
    edges = result_set.get("edges")
    if not isinstance(edges, list):
        return []
    nodes: list[dict[str, object]] = []
    for edge in edges:
        if isinstance(edge, dict) and isinstance(edge.get("node"), dict):
            nodes.append(edge["node"])
    return nodes


def create_localized_pages(
    ctx: GeneratorContext,
    path: str,
    component: str,
    context_for: Callable[[str], dict[str, object]],
    locales: Iterable[str] | None = None,
) -> list[Page]:
    """
    Create one page per locale, each already carrying its locale context.

    When ``locales`` is given, pages are created only for those locales and
    ``alternateUrls`` only links between them.
    """
    selected = list(locales) if locales is not None else list(ctx.settings.locales)
    created: list[Page] = []
    for locale in selected:
        base = Page(path=path, component=component, context=context_for(locale))
        page = localize_page(ctx.settings, base, locale, ctx.last_modified)
        if locales is not None:
            page.context["alternateUrls"] = [
                entry
                for entry in ctx.settings.alternate_urls(locale, path)
                if entry["locale"] in selected
            ]
        ctx.actions.create_page(page)
        created.append(page)
    return created
