"""
Global test configuration fixtures for Polyglot Site tests.

This module provides reusable pytest fixtures for locale settings, site
configurations, build actions and a fixed clock so page contexts are
deterministic.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import pytest

from src.polyglot_site.build.actions import BuildActions
from src.polyglot_site.config.schema import (
    CatalogConfig,
    ContentConfig,
    FeatureFlagsConfig,
    I18nConfig,
    SiteConfig,
)
from src.polyglot_site.i18n.catalogs import Catalogs
from src.polyglot_site.i18n.locales import LocaleSettings

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Clock returning a fixed UTC timestamp."""
    return fixed_clock


@pytest.fixture
def en_fr_settings() -> LocaleSettings:
    """English default with French as the only additional locale."""
    return LocaleSettings(
        default_locale="en",
        supported_languages=["en", "fr"],
        contentful_locale={"en": "en-US", "fr": "fr-FR"},
    )


@pytest.fixture
def three_locale_settings() -> LocaleSettings:
    """English default with French and German."""
    return LocaleSettings(
        default_locale="en",
        supported_languages=["en", "fr", "de"],
        contentful_locale={"en": "en-US", "fr": "fr-FR", "de": "de-DE"},
    )


@pytest.fixture
def actions() -> BuildActions:
    return BuildActions()


@pytest.fixture
def empty_catalogs(three_locale_settings: LocaleSettings) -> Catalogs:
    return Catalogs.empty(three_locale_settings.locales)


@pytest.fixture
def base_config() -> SiteConfig:
    """Docs-only configuration publishing in English and French."""
    return SiteConfig(
        i18n=I18nConfig(
            default_locale="en",
            supported_languages=["en", "fr"],
            contentful_locale={"en": "en-US", "fr": "fr-FR"},
        ),
    )


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A site directory with docs content and an empty locale tree."""
    content = tmp_path / "src" / "content"
    docs = content / "docs" / "getting-started"
    docs.mkdir(parents=True)
    _ = (docs / "install.mdx").write_text(
        "---\ntitle: Install\n---\n# Install\n", encoding="utf-8"
    )
    _ = (docs / "install.fr.mdx").write_text(
        "---\ntitle: Installation\n---\n# Installation\n", encoding="utf-8"
    )
    _ = (content / "docs" / "index.mdx").write_text(
        "---\ntitle: Docs\n---\nWelcome\n", encoding="utf-8"
    )
    (tmp_path / "src" / "locale").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def site_config(site_dir: Path) -> SiteConfig:
    """Configuration pointing at ``site_dir`` with no catalog sources to compile."""
    return SiteConfig(
        i18n=I18nConfig(
            default_locale="en",
            supported_languages=["en", "fr"],
            contentful_locale={"en": "en-US", "fr": "fr-FR"},
        ),
        content=ContentConfig(content_dir="src/content", source_root="src/content"),
        catalogs=CatalogConfig(locale_dir="src/locale"),
        features=FeatureFlagsConfig(docs=True),
    )
