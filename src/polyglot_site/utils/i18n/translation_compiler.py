"""
Built-in catalog compiler.

Compiles the ``<locale>/LC_MESSAGES/<domain>.po`` sources under a locale
directory with ``msgfmt``. A catalog whose ``.mo`` is newer than its source is
left alone unless compilation is forced. Failures are collected per catalog so
the caller can decide whether the build may continue.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing_extensions import override

from .i18n_utils import compile_po_to_mo

logger = logging.getLogger(__name__)

LC_MESSAGES = "LC_MESSAGES"


@dataclass
class CompilationResult:
    """Outcome of compiling a locale directory."""

    compiled_files: list[Path] = field(default_factory=list)
    skipped_files: list[Path] = field(default_factory=list)
    failed_files: list[tuple[Path, Exception]] = field(default_factory=list)
    total_files: int = 0

    @property
    def success_count(self) -> int:
        return len(self.compiled_files)

    @property
    def skip_count(self) -> int:
        return len(self.skipped_files)

    @property
    def failure_count(self) -> int:
        return len(self.failed_files)

    @property
    def ok(self) -> bool:
        """True when no catalog failed to compile."""
        return not self.failed_files

    @override
    def __str__(self) -> str:
        return (
            f"Catalogs: {self.success_count} compiled, "
            f"{self.skip_count} skipped, {self.failure_count} failed"
        )


def find_po_files(
    locale_dir: Path,
    languages: list[str] | None = None,
    domain: str | None = None,
) -> list[Path]:
    """
    Catalog sources below ``locale_dir``.

    Args:
        locale_dir: Root of the ``<locale>/LC_MESSAGES`` tree
        languages: Locale directories to search; every non-hidden one when None
        domain: Only ``<domain>.po``; any domain when None

    Returns:
        Sorted source paths
    """
    if not locale_dir.exists():
        logger.warning(f"Locale directory does not exist: {locale_dir}")
        return []

    if languages is None:
        candidates = [
            entry
            for entry in locale_dir.iterdir()
            if entry.is_dir() and not entry.name.startswith(".")
        ]
    else:
        candidates = [locale_dir / language for language in languages]

    pattern = f"{domain}.po" if domain else "*.po"
    sources: list[Path] = []
    for language_dir in candidates:
        messages_dir = language_dir / LC_MESSAGES
        if messages_dir.is_dir():
            sources.extend(messages_dir.glob(pattern))
    return sorted(sources)


def needs_compilation(po_file: Path, mo_file: Path | None = None) -> bool:
    """Whether ``mo_file`` is missing or older than ``po_file``."""
    target = mo_file if mo_file is not None else po_file.with_suffix(".mo")
    try:
        return po_file.stat().st_mtime > target.stat().st_mtime
    except FileNotFoundError:
        return True
    except OSError as e:
        logger.warning(f"Cannot compare {po_file} with {target}: {e}")
        return True


def compile_translation_file(
    po_file: Path, mo_file: Path | None = None, force: bool = False
) -> bool:
    """
    Compile one catalog.

    Returns:
        False when the compiled catalog was already up to date

    Raises:
        subprocess.CalledProcessError: If msgfmt rejects the source
        FileNotFoundError: If msgfmt is not installed
    """
    target = mo_file if mo_file is not None else po_file.with_suffix(".mo")
    if not force and not needs_compilation(po_file, target):
        logger.debug(f"{target} is up to date")
        return False

    compile_po_to_mo(po_file, target)
    return True


def compile_all_translations(
    locale_dir: Path,
    languages: list[str] | None = None,
    domain: str | None = None,
    force: bool = False,
    fail_fast: bool = False,
) -> CompilationResult:
    """
    Compile every matching catalog below ``locale_dir``.

    Args:
        locale_dir: Root of the ``<locale>/LC_MESSAGES`` tree
        languages: Restrict to these locales
        domain: Restrict to this gettext domain
        force: Recompile up-to-date catalogs too
        fail_fast: Stop at the first catalog that fails
    """
    result = CompilationResult()
    sources = find_po_files(locale_dir, languages, domain)
    result.total_files = len(sources)

    if not sources:
        logger.warning(f"No catalog sources found in {locale_dir}")
        return result

    for po_file in sources:
        try:
            compiled = compile_translation_file(po_file, force=force)
        except (OSError, subprocess.SubprocessError) as e:
            logger.error(f"Catalog {po_file} failed to compile: {e}")
            result.failed_files.append((po_file, e))
            if fail_fast:
                break
            continue

        if compiled:
            result.compiled_files.append(po_file)
        else:
            result.skipped_files.append(po_file)

    logger.info(str(result))
    return result
