"""CMS newsletter issue pages."""

from __future__ import annotations

import logging

from ..pages.models import Page
from .common import GeneratorContext, create_localized_pages, join_path

logger = logging.getLogger(__name__)

NEWSLETTER_COMPONENT = "templates/newsletter"


def create_contentful_newsletter(
    ctx: GeneratorContext, newsletters: list[dict[str, object]]
) -> list[Page]:
    created: list[Page] = []
    for newsletter in newsletters:
        slug = newsletter.get("slug")
        if not isinstance(slug, str) or not slug.strip("/"):
            logger.warning("Skipping newsletter without slug")
            continue
        slug = slug.strip("/")
        created.extend(
            create_localized_pages(
                ctx,
                join_path("newsletter", slug),
                NEWSLETTER_COMPONENT,
                lambda locale, slug=slug: {"slug": slug},
            )
        )

    logger.info(f"Created {len(created)} newsletter page(s)")
    return created
