"""
Project directory pages.

The directory root lists every category with its project count; each
category gets its own listing page under a slug no other category shares.
"""

from __future__ import annotations

import logging

from ..pages.models import Page
from .common import GeneratorContext, create_localized_pages, join_path, unique_slugs

logger = logging.getLogger(__name__)

PROJECT_DIRECTORY_COMPONENT = "templates/project-directory"
PROJECTS_ROOT = "/projects"


def _categories(by_category: object) -> list[dict[str, object]]:
    if not isinstance(by_category, dict):
        return []
    group = by_category.get("group")
    if not isinstance(group, list):
        return []

    categories: list[dict[str, object]] = []
    for entry in group:
        if not isinstance(entry, dict):
            continue
        name = entry.get("fieldValue")
        if not isinstance(name, str) or not name:
            continue
        count = entry.get("totalCount")
        categories.append({"name": name, "count": count if isinstance(count, int) else 0})

    categories.sort(key=lambda category: str(category["name"]).lower())
    slugs = unique_slugs(str(category["name"]) for category in categories)
    return [
        {"name": category["name"], "slug": slugs[str(category["name"])], "count": category["count"]}
        for category in categories
    ]


def create_project_directory(
    ctx: GeneratorContext, project_count: int, by_category: object
) -> list[Page]:
    catalogs = ctx.catalogs
    categories = _categories(by_category)

    created = create_localized_pages(
        ctx,
        join_path(PROJECTS_ROOT),
        PROJECT_DIRECTORY_COMPONENT,
        lambda locale: {
            "title": catalogs.translate(locale, "Project directory"),
            "projectCount": project_count,
            "categories": categories,
            "category": None,
        },
    )

    for category in categories:
        created.extend(
            create_localized_pages(
                ctx,
                join_path(PROJECTS_ROOT, str(category["slug"])),
                PROJECT_DIRECTORY_COMPONENT,
                lambda locale, category=category: {
                    "title": catalogs.translate(
                        locale, "{category} projects", category=category["name"]
                    ),
                    "projectCount": category["count"],
                    "categories": categories,
                    "category": category["name"],
                },
            )
        )

    logger.info(f"Created {len(created)} project directory page(s)")
    return created
