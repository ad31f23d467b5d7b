"""Tests for the local markdown/MDX content source."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.polyglot_site.content.local import (
    LocalContentSource,
    node_id_for,
    parse_front_matter,
)
from src.polyglot_site.nodes.store import node_type
from src.polyglot_site.utils.core.exceptions import ContentError
from tests.utils.test_helpers import write_content_file


class TestParseFrontMatter:
    def test_front_matter_and_body(self) -> None:
        meta, body = parse_front_matter("---\ntitle: Install\nslug: setup\n---\n# Install\n")

        assert meta == {"title": "Install", "slug": "setup"}
        assert body == "# Install\n"

    def test_delimiters_with_trailing_spaces(self) -> None:
        meta, body = parse_front_matter("---  \ntitle: Spaced\n---\t\n\nBody text\n")

        assert meta == {"title": "Spaced"}
        assert body == "Body text\n"

    def test_no_front_matter(self) -> None:
        meta, body = parse_front_matter("# Just a heading\n")

        assert meta == {}
        assert body == "# Just a heading\n"

    def test_unterminated_front_matter_is_body(self) -> None:
        text = "---\ntitle: Install\n"

        assert parse_front_matter(text) == ({}, text)

    def test_empty_front_matter(self) -> None:
        assert parse_front_matter("---\n---\nbody") == ({}, "body")

    def test_byte_order_mark_ignored(self) -> None:
        meta, _ = parse_front_matter("\ufeff---\ntitle: BOM\n---\n")

        assert meta == {"title": "BOM"}

    def test_invalid_yaml(self) -> None:
        with pytest.raises(ContentError, match="Invalid front matter"):
            _ = parse_front_matter("---\ntitle: [unclosed\n---\n")

    def test_non_mapping(self) -> None:
        with pytest.raises(ContentError, match="must be a mapping"):
            _ = parse_front_matter("---\n- a\n- b\n---\n", Path("list.mdx"))


class TestLocalContentSource:
    """Test cases for LocalContentSource."""

    def test_iter_files_filters_extensions(self, tmp_path: Path) -> None:
        _ = write_content_file(tmp_path, "docs/a.mdx")
        _ = write_content_file(tmp_path, "docs/b.MD")
        _ = write_content_file(tmp_path, "docs/image.png")

        files = LocalContentSource(tmp_path).iter_files()

        assert [path.name for path in files] == ["a.mdx", "b.MD"]

    def test_missing_content_dir(self, tmp_path: Path) -> None:
        assert list(LocalContentSource(tmp_path / "missing")) == []

    def test_load_node(self, tmp_path: Path) -> None:
        path = write_content_file(
            tmp_path, "src/content/docs/intro.fr.mdx", {"title": "Introduction"}, "Bonjour"
        )

        node = LocalContentSource(tmp_path).load_node(path)

        assert node_type(node) == "Mdx"
        assert node["id"] == node_id_for(path.resolve())
        assert node["fileAbsolutePath"] == path.resolve().as_posix()
        assert node["frontmatter"] == {"title": "Introduction"}
        assert node["body"] == "Bonjour"

    def test_node_ids_are_stable_and_distinct(self, tmp_path: Path) -> None:
        assert node_id_for(tmp_path / "a.mdx") == node_id_for(tmp_path / "a.mdx")
        assert node_id_for(tmp_path / "a.mdx") != node_id_for(tmp_path / "a.fr.mdx")
        assert node_id_for(tmp_path / "a.mdx").startswith("mdx-")

    def test_unreadable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.mdx"
        _ = path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(ContentError, match="Cannot read"):
            _ = LocalContentSource(tmp_path).load_node(path)

    def test_iter_yields_nodes(self, site_dir: Path) -> None:
        nodes = list(LocalContentSource(site_dir / "src" / "content"))

        assert len(nodes) == 3
        assert all(node_type(node) == "Mdx" for node in nodes)
