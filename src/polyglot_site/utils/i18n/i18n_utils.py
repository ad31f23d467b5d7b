"""
Low-level gettext tooling wrappers.

Usage Examples:
    Compile a catalog:
        >>> from polyglot_site.utils.i18n.i18n_utils import compile_po_to_mo
        >>> compile_po_to_mo(Path("src/locale/fr/LC_MESSAGES/messages.po"))

    Run a project-specific compile step:
        >>> run_compile_command(["yarn", "compile-i18n"])
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def compile_po_to_mo(po_file: Path, mo_file: Path | None = None) -> None:
    """
    Compile a .po file to .mo binary format.

    Args:
        po_file: Path to the .po file to compile
        mo_file: Path for the output .mo file (defaults to same location as .po)

    Raises:
        subprocess.CalledProcessError: If msgfmt rejects the catalog
        FileNotFoundError: If msgfmt is not installed
    """
    if mo_file is None:
        mo_file = po_file.with_suffix(".mo")

    try:
        _ = subprocess.run(
            ["msgfmt", "-o", str(mo_file), str(po_file)],
            capture_output=True,
            text=True,
            check=True,
        )

        logger.info(f"Compiled {po_file} to {mo_file}")

    except subprocess.CalledProcessError as e:
        logger.error(f"Failed to compile {po_file}: {e.stderr}")
        raise
    except FileNotFoundError:
        logger.warning("msgfmt command not found. Install gettext tools to compile .po files.")
        raise


def run_compile_command(command: Sequence[str], cwd: Path | None = None) -> None:
    """
    Run an external catalog compiler and wait for it to finish.

    Args:
        command: Program and arguments, e.g. ``["yarn", "compile-i18n"]``
        cwd: Working directory for the command

    Raises:
        subprocess.CalledProcessError: If the command exits non-zero
        FileNotFoundError: If the program does not exist
    """
    logger.debug(f"Running catalog compiler: {' '.join(command)}")
    completed = subprocess.run(
        list(command),
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    if completed.stdout:
        logger.debug(completed.stdout.strip())
