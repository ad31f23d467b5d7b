"""
CMS blog pages.

``create_contentful_pages`` publishes one page per post per locale; the
template queries the post body with ``contentfulLocale``.
``create_contentful_blog`` publishes the blog index and one listing per
category, newest posts first. Category slugs are unique within the blog.
"""

from __future__ import annotations

import logging

from ..pages.models import Page
from .common import GeneratorContext, create_localized_pages, join_path, unique_slugs

logger = logging.getLogger(__name__)

BLOG_POST_COMPONENT = "templates/blog-post"
BLOG_INDEX_COMPONENT = "templates/blog-index"
BLOG_ROOT = "/blog"


def _post_slug(post: dict[str, object]) -> str | None:
    slug = post.get("slug")
    if isinstance(slug, str) and slug.strip("/"):
        return slug.strip("/")
    return None


def _newest_first(posts: list[dict[str, object]]) -> list[dict[str, object]]:
    return sorted(posts, key=lambda post: str(post.get("updatedAt") or ""), reverse=True)


def create_contentful_pages(ctx: GeneratorContext, posts: list[dict[str, object]]) -> list[Page]:
    """Create every blog post page in every locale."""
    created: list[Page] = []
    for post in posts:
        slug = _post_slug(post)
        if slug is None:
            logger.warning(f"Skipping blog post without slug: {post.get('title')!r}")
            continue

        def context_for(locale: str, post: dict[str, object] = post, slug: str = slug) -> dict[str, object]:
            return {
                "slug": slug,
                "title": post.get("title"),
                "category": post.get("category"),
                "updatedAt": post.get("updatedAt"),
            }

        created.extend(
            create_localized_pages(
                ctx, join_path(BLOG_ROOT, slug), BLOG_POST_COMPONENT, context_for
            )
        )

    logger.info(f"Created {len(created)} blog post page(s)")
    return created


def create_contentful_blog(ctx: GeneratorContext, posts: list[dict[str, object]]) -> list[Page]:
    """Create the blog index and per-category listings in every locale."""
    catalogs = ctx.catalogs
    ordered = [post for post in _newest_first(posts) if _post_slug(post)]

    categories: dict[str, list[dict[str, object]]] = {}
    for post in ordered:
        category = post.get("category")
        if isinstance(category, str) and category:
            categories.setdefault(category, []).append(post)
    slugs = unique_slugs(sorted(categories))

    created = create_localized_pages(
        ctx,
        join_path(BLOG_ROOT),
        BLOG_INDEX_COMPONENT,
        lambda locale: {
            "title": catalogs.translate(locale, "Blog"),
            "posts": [_post_slug(post) for post in ordered],
            "categories": sorted(categories),
            "categorySlugs": slugs,
        },
    )

    for category, category_posts in sorted(categories.items()):

        def context_for(
            locale: str,
            category: str = category,
            category_posts: list[dict[str, object]] = category_posts,
        ) -> dict[str, object]:
            return {
                "title": catalogs.translate(locale, "Posts in {category}", category=category),
                "category": category,
                "posts": [_post_slug(post) for post in category_posts],
            }

        created.extend(
            create_localized_pages(
                ctx,
                join_path(BLOG_ROOT, "category", slugs[category]),
                BLOG_INDEX_COMPONENT,
                context_for,
            )
        )

    logger.info(f"Created {len(created)} blog listing page(s)")
    return created
