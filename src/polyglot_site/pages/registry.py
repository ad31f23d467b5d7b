"""
The build's page set.

Pages are keyed by path and kept in creation order. Creating a page at an
existing path replaces it. Listeners are notified after every creation, which
is how page post-processing hooks such as locale fan-out are driven.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from .models import Page

logger = logging.getLogger(__name__)

PageListener = Callable[[Page], None]


class PageRegistry:
    """Ordered set of pages keyed by path."""

    def __init__(self) -> None:
        self._pages: dict[str, Page] = {}
        self._listeners: list[PageListener] = []

    def add_listener(self, listener: PageListener) -> None:
        """Register a callback invoked with every newly created page."""
        self._listeners.append(listener)

    def create_page(self, page: Page) -> None:
        """Add ``page``, replacing any page at the same path, then notify listeners."""
        if page.path in self._pages:
            logger.debug(f"Replacing existing page at {page.path}")
            # Re-insert so the replacement takes its creation position
            del self._pages[page.path]
        self._pages[page.path] = page
        logger.debug(f"Created page {page.path} ({page.component})")

        for listener in list(self._listeners):
            listener(page)

    def delete_page(self, page: Page) -> None:
        """Remove the page at ``page.path``; unknown paths are ignored."""
        if self._pages.pop(page.path, None) is None:
            logger.debug(f"No page to delete at {page.path}")
            return
        logger.debug(f"Deleted page {page.path}")

    def get(self, path: str) -> Page | None:
        return self._pages.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self._pages

    def __iter__(self) -> Iterator[Page]:
        return iter(list(self._pages.values()))

    def __len__(self) -> int:
        return len(self._pages)

    @property
    def pages(self) -> list[Page]:
        """Snapshot of all pages in creation order."""
        return list(self._pages.values())
