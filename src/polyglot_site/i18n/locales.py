"""
Locale settings and route helpers.

Every route the site emits is built here: the default locale is served at the
bare path and every other locale at ``/<locale><path>``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypedDict

from ..config.schema import I18nConfig


class AlternateUrl(TypedDict):
    """A same-content page in another locale."""

    locale: str
    path: str


class LocaleSettings:
    """Default locale, ordered supported locales and the CMS locale mapping."""

    def __init__(
        self,
        default_locale: str,
        supported_languages: Sequence[str],
        contentful_locale: Mapping[str, str] | None = None,
    ) -> None:
        self.default_locale: str = default_locale
        self.supported_languages: tuple[str, ...] = tuple(supported_languages)
        self.contentful_locale: dict[str, str] = dict(contentful_locale or {})

    @classmethod
    def from_config(cls, config: I18nConfig) -> LocaleSettings:
        """Build settings from the validated ``i18n`` config section."""
        return cls(
            default_locale=config.default_locale,
            supported_languages=config.supported_languages,
            contentful_locale=config.contentful_locale,
        )

    @property
    def additional_locales(self) -> tuple[str, ...]:
        """Supported locales other than the default, in declaration order."""
        return tuple(
            locale
            for locale in self.supported_languages
            if locale != self.default_locale
        )

    @property
    def locales(self) -> tuple[str, ...]:
        """The default locale followed by every additional locale."""
        return (self.default_locale, *self.additional_locales)

    def is_supported(self, locale: str) -> bool:
        return locale in self.locales

    def cms_locale(self, locale: str) -> str | None:
        """CMS-side locale identifier, or None when unmapped."""
        return self.contentful_locale.get(locale)

    def localized_path(self, locale: str, path: str) -> str:
        """Route of ``path`` in ``locale``."""
        if locale == self.default_locale:
            return path
        return f"/{locale}{path}"

    def alternate_urls(self, locale: str, path: str) -> list[AlternateUrl]:
        """Routes of ``path`` in every locale except ``locale``."""
        return [
            AlternateUrl(locale=other, path=self.localized_path(other, path))
            for other in self.locales
            if other != locale
        ]
