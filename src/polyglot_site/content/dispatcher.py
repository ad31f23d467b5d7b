"""
Page query dispatcher.

Runs the composite page query once and routes each result set to its page
generator. Any query error fails page creation as a whole; nothing is created
from a partial result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from ..config.schema import FeatureFlagsConfig
from ..generators import (
    GeneratorContext,
    create_contentful_blog,
    create_contentful_newsletter,
    create_contentful_pages,
    create_docs_pages,
    create_mdx_pages,
    create_project_directory,
)
from ..generators.common import edge_nodes
from ..i18n.catalogs import Catalogs
from ..i18n.locales import LocaleSettings
from ..utils.core.exceptions import QueryError
from .fragments import build_page_query
from .graph import GraphQL

if TYPE_CHECKING:
    from ..build.actions import Actions

logger = logging.getLogger(__name__)


def _total_count(result_set: object) -> int:
    if isinstance(result_set, dict):
        count = result_set.get("totalCount")
        if isinstance(count, int):
            return count
    return 0


class PageQueryDispatcher:
    """Issues the page query and hands result sets to generators."""

    def __init__(
        self,
        settings: LocaleSettings,
        features: FeatureFlagsConfig,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.settings: LocaleSettings = settings
        self.features: FeatureFlagsConfig = features
        self._clock: Callable[[], datetime] = clock

    async def create_pages(
        self, graphql: GraphQL, actions: Actions, catalogs: Catalogs
    ) -> None:
        """
        Run the page query and create every page it yields.

        Raises:
            QueryError: If the query reports errors
        """
        query = build_page_query(self.features)
        result = await graphql(query)

        errors = result.get("errors")
        if errors:
            logger.error(f"Page query failed: {errors}")
            raise QueryError("Page query returned errors", errors=list(errors))

        data = result.get("data", {})
        ctx = GeneratorContext(
            actions=actions,
            settings=self.settings,
            catalogs=catalogs,
            last_modified=self._clock().isoformat(),
        )
        features = self.features

        if features.docs:
            _ = create_docs_pages(ctx, edge_nodes(data.get("docs")))

        if features.mdx_pages:
            _ = create_mdx_pages(ctx, edge_nodes(data.get("mdxPages")))

        if features.blog:
            posts = edge_nodes(data.get("allContentfulBlogPost"))
            _ = create_contentful_pages(ctx, posts)
            _ = create_contentful_blog(ctx, posts)

        if features.newsletter:
            _ = create_contentful_newsletter(
                ctx, edge_nodes(data.get("allContentfulNewsletter"))
            )

        if features.projects:
            _ = create_project_directory(
                ctx,
                _total_count(data.get("allContentfulProject")),
                data.get("allContentfulProjectCategory"),
            )
