"""
Locale fan-out.

Every page generator that knows about locales attaches ``locale`` to the page
context. A page created without one has no translated versions yet, so it is
replaced by one copy per locale: the default locale at the original path and
every other locale under ``/<locale>``. Each copy lists its siblings in
``alternateUrls`` so the head can link to them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from ..i18n.locales import LocaleSettings
from .models import Page

if TYPE_CHECKING:
    from ..build.actions import Actions

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def localize_page(
    settings: LocaleSettings, page: Page, locale: str, last_modified: str
) -> Page:
    """Copy of ``page`` for ``locale`` with cross-linking context."""
    contentful_locale = settings.cms_locale(locale)
    if contentful_locale is None:
        logger.debug(f"No CMS locale mapped for {locale!r}")

    return Page(
        path=settings.localized_path(locale, page.path),
        component=page.component,
        context={
            **page.context,
            "locale": locale,
            "urlPath": page.path,
            "contentfulLocale": contentful_locale,
            "lastModified": last_modified,
            "alternateUrls": settings.alternate_urls(locale, page.path),
        },
    )


class LocaleFanOut:
    """Replaces locale-less pages with one page per supported locale."""

    def __init__(
        self,
        settings: LocaleSettings,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.settings: LocaleSettings = settings
        self._clock: Callable[[], datetime] = clock

    def expand(self, page: Page) -> list[Page]:
        """All locale copies of ``page``, default locale first."""
        last_modified = self._clock().isoformat()
        return [
            localize_page(self.settings, page, locale, last_modified)
            for locale in self.settings.locales
        ]

    def on_create_page(self, page: Page, actions: Actions) -> None:
        """Fan ``page`` out unless it already carries a locale."""
        if page.context.get("locale"):
            return

        localized = self.expand(page)
        actions.delete_page(page)
        for localized_page in localized:
            actions.create_page(localized_page)

        logger.debug(
            f"Fanned out {page.path} into {len(localized)} locale page(s)"
        )
