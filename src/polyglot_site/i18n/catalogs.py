"""
Translation catalogs for page generation.

The catalog preloader runs once before any page is generated: it compiles the
gettext sources (either with the built-in ``msgfmt`` compiler or with a
project-specific command) and loads one catalog per locale. The resulting
``Catalogs`` value is passed explicitly to every page generator.

Usage Examples:
    >>> preloader = CatalogPreloader(config.catalogs, settings, base_dir=Path("."))
    >>> catalogs = preloader.preload()
    >>> catalogs.translate("fr", "Hello, {name}!", name="Alice")
    'Bonjour, Alice !'
"""

from __future__ import annotations

import gettext
import logging
import subprocess
from collections.abc import Iterator, Mapping
from pathlib import Path

from ..config.schema import CatalogConfig
from ..utils.core.exceptions import CatalogCompileError
from ..utils.i18n.i18n_utils import run_compile_command
from ..utils.i18n.translation_compiler import compile_all_translations
from .locales import LocaleSettings

logger = logging.getLogger(__name__)


class Catalogs(Mapping[str, gettext.NullTranslations]):
    """Read-only mapping of locale code to its loaded catalog."""

    def __init__(self, translations: Mapping[str, gettext.NullTranslations]) -> None:
        self._translations: dict[str, gettext.NullTranslations] = dict(translations)

    def __getitem__(self, locale: str) -> gettext.NullTranslations:
        return self._translations[locale]

    def __iter__(self) -> Iterator[str]:
        return iter(self._translations)

    def __len__(self) -> int:
        return len(self._translations)

    def gettext(self, locale: str, message: str) -> str:
        """Translate ``message``; unknown locales return it unchanged."""
        translation = self._translations.get(locale)
        if translation is None:
            return message
        return translation.gettext(message)

    def translate(self, locale: str, message: str, **kwargs: object) -> str:
        """
        Translate a message with optional formatting.

        Examples:
            >>> catalogs.translate("en", "Page {number}", number=2)
            'Page 2'
        """
        translated = self.gettext(locale, message)

        if kwargs:
            try:
                return translated.format(**kwargs)
            except (KeyError, ValueError) as e:
                logger.warning(f"Translation formatting error for '{message}': {e}")
                return translated

        return translated

    @classmethod
    def empty(cls, locales: tuple[str, ...] = ()) -> Catalogs:
        """Identity catalogs, used when no translations are available."""
        return cls({locale: gettext.NullTranslations() for locale in locales})


class CatalogPreloader:
    """Compiles and loads translation catalogs before page generation."""

    def __init__(
        self,
        config: CatalogConfig,
        settings: LocaleSettings,
        base_dir: Path | None = None,
    ) -> None:
        self.config: CatalogConfig = config
        self.settings: LocaleSettings = settings
        self.base_dir: Path = base_dir if base_dir is not None else Path.cwd()

    @property
    def locale_dir(self) -> Path:
        locale_dir = Path(self.config.locale_dir)
        return locale_dir if locale_dir.is_absolute() else self.base_dir / locale_dir

    def compile(self) -> None:
        """
        Run the catalog compiler.

        Raises:
            CatalogCompileError: If the compiler fails or cannot be started
        """
        command = self.config.compile_command
        if command:
            try:
                run_compile_command(command, cwd=self.base_dir)
            except subprocess.CalledProcessError as e:
                raise CatalogCompileError(
                    f"Catalog compiler {' '.join(command)!r} exited with status {e.returncode}: {e.stderr}",
                    returncode=e.returncode,
                    context=command,
                ) from e
            except FileNotFoundError as e:
                raise CatalogCompileError(
                    f"Catalog compiler not found: {command[0]}",
                    context=command,
                ) from e
            return

        result = compile_all_translations(
            self.locale_dir,
            languages=list(self.settings.locales),
            domain=self.config.domain,
        )
        if not result.ok:
            failed = ", ".join(str(po_file) for po_file, _ in result.failed_files)
            raise CatalogCompileError(
                f"Failed to compile catalogs: {failed}",
                context=result,
            )

    def load(self) -> Catalogs:
        """Load the compiled catalog of every locale."""
        translations: dict[str, gettext.NullTranslations] = {}
        for locale in self.settings.locales:
            try:
                translations[locale] = gettext.translation(
                    self.config.domain,
                    localedir=self.locale_dir,
                    languages=[locale],
                )
            except FileNotFoundError:
                logger.warning(
                    f"No compiled catalog for {locale!r} in {self.locale_dir}, using source strings"
                )
                translations[locale] = gettext.NullTranslations()
        return Catalogs(translations)

    def preload(self) -> Catalogs:
        """Compile, then load, every catalog."""
        logger.info("[i18n] Building catalogs…")
        self.compile()
        logger.info("[i18n] Done!")
        return self.load()
