"""
Local markdown/MDX content source.

Walks the content directory and turns every markdown or MDX file into an
``Mdx`` node. Front matter is split and parsed with python-frontmatter's YAML
handler.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import yaml
from frontmatter import YAMLHandler

from ..nodes.store import Node
from ..utils.core.exceptions import ContentError

logger = logging.getLogger(__name__)

FRONT_MATTER = YAMLHandler()


def parse_front_matter(text: str, source: Path | None = None) -> tuple[dict[str, object], str]:
    """
    Split YAML front matter from the body of a content file.

    A file whose opening ``---`` is never closed has no front matter.

    Args:
        text: Raw file contents
        source: File the text was read from, for error messages

    Returns:
        Tuple of front matter mapping (empty if absent) and body

    Raises:
        ContentError: If the front matter is not valid YAML or not a mapping
    """
    clean_text = text.lstrip("\ufeff")
    if not FRONT_MATTER.detect(clean_text):
        return {}, clean_text

    try:
        raw, body = FRONT_MATTER.split(clean_text)
    except ValueError:
        return {}, clean_text

    try:
        meta: object = FRONT_MATTER.load(raw)
    except yaml.YAMLError as e:
        raise ContentError(f"Invalid front matter in {source or '<string>'}: {e}", context=source) from e

    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise ContentError(
            f"Front matter in {source or '<string>'} must be a mapping, got {type(meta).__name__}",
            context=source,
        )

    return meta, body.lstrip("\r\n")


def node_id_for(path: Path) -> str:
    """Stable node id derived from the file path."""
    digest = hashlib.sha1(path.as_posix().encode("utf-8")).hexdigest()
    return f"mdx-{digest[:16]}"


class LocalContentSource:
    """Produces ``Mdx`` nodes from files under a content directory."""

    def __init__(self, content_dir: Path, extensions: Sequence[str] = (".md", ".mdx")) -> None:
        self.content_dir: Path = content_dir
        self.extensions: tuple[str, ...] = tuple(ext.lower() for ext in extensions)

    def iter_files(self) -> list[Path]:
        if not self.content_dir.exists():
            logger.warning(f"Content directory does not exist: {self.content_dir}")
            return []
        return sorted(
            path
            for path in self.content_dir.rglob("*")
            if path.is_file() and path.suffix.lower() in self.extensions
        )

    def load_node(self, path: Path) -> Node:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentError(f"Cannot read content file {path}: {e}", context=path) from e

        frontmatter, body = parse_front_matter(text, path)
        absolute = path.resolve()
        return {
            "id": node_id_for(absolute),
            "internal": {"type": "Mdx"},
            "fileAbsolutePath": absolute.as_posix(),
            "frontmatter": frontmatter,
            "body": body,
        }

    def __iter__(self) -> Iterator[Node]:
        files = self.iter_files()
        logger.info(f"Sourcing {len(files)} content file(s) from {self.content_dir}")
        for path in files:
            yield self.load_node(path)
