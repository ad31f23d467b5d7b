"""
Node field tagging.

Content files carry their locale in the filename (``about.fr.mdx``) and their
page path in their location below the content root
(``src/content/guides/setup/index.mdx`` -> ``/guides/setup``).
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from ..i18n.locales import LocaleSettings
from .store import Node, node_type

if TYPE_CHECKING:
    from ..build.actions import Actions

logger = logging.getLogger(__name__)

FILE_NODE_TYPES = frozenset({"Mdx", "MarkdownRemark"})


class NodeFieldTagger:
    """Derives ``locale`` and ``path`` fields for content nodes."""

    def __init__(self, settings: LocaleSettings, source_root: str = "src/content") -> None:
        self.settings: LocaleSettings = settings
        self.source_root: str = source_root.strip("/")

    def get_file_name(self, node: Node) -> str | None:
        """Filename of a file-backed node without its final extension."""
        if node_type(node) not in FILE_NODE_TYPES:
            return None
        file_path = node.get("fileAbsolutePath")
        if not isinstance(file_path, str) or not file_path:
            return None
        return PurePosixPath(file_path.replace("\\", "/")).stem

    def get_locale(self, filename: str) -> str | None:
        """Locale suffix of ``filename`` if it names a supported locale."""
        _, dot, suffix = filename.rpartition(".")
        if not dot or not suffix:
            return None
        if self.settings.is_supported(suffix):
            return suffix
        return None

    def get_path(self, node: Node) -> str | None:
        """Directory of an MDX file relative to the content root."""
        file_path = node.get("fileAbsolutePath")
        if node_type(node) != "Mdx" or not isinstance(file_path, str) or not file_path:
            return None

        normalized = file_path.replace("\\", "/")
        if self.source_root:
            _, found, segment = normalized.partition(self.source_root)
            if not found:
                return None
        else:
            segment = normalized

        if not segment:
            return None
        directory = str(PurePosixPath(segment).parent)
        return None if directory == "." else directory

    def on_create_node(self, node: Node, actions: Actions) -> None:
        filename = self.get_file_name(node)
        if filename:
            locale = self.get_locale(filename)
            if locale:
                actions.create_node_field(node, "locale", locale)
            else:
                logger.debug(f"No locale in filename {filename!r}")

        path = self.get_path(node)
        if path:
            actions.create_node_field(node, "path", path)
