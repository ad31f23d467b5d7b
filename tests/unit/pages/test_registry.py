"""Tests for the page registry and page descriptors."""

from __future__ import annotations

import pytest

from src.polyglot_site.pages.models import Page
from src.polyglot_site.pages.registry import PageRegistry
from tests.utils.test_helpers import make_page


class TestPage:
    def test_path_must_be_absolute(self) -> None:
        with pytest.raises(ValueError, match="must start with '/'"):
            _ = Page(path="about", component="templates/page")

    def test_locale_property(self) -> None:
        assert make_page(locale="fr").locale == "fr"
        assert make_page().locale is None
        assert make_page(locale=None).locale is None

    @pytest.mark.parametrize("locale", [1, True, ["fr"], {"code": "fr"}])
    def test_non_string_locale_rejected(self, locale: object) -> None:
        with pytest.raises(TypeError, match="locale must be a string"):
            _ = make_page("/about", locale=locale)

    def test_to_dict_copies_context(self) -> None:
        page = make_page("/about", title="About")

        data = page.to_dict()
        data_context = data["context"]
        assert isinstance(data_context, dict)
        data_context["title"] = "Changed"

        assert data["path"] == "/about"
        assert data["component"] == "templates/page"
        assert page.context["title"] == "About"


class TestPageRegistry:
    """Test cases for PageRegistry."""

    def test_create_and_get(self) -> None:
        registry = PageRegistry()
        page = make_page("/about")

        registry.create_page(page)

        assert registry.get("/about") is page
        assert "/about" in registry
        assert len(registry) == 1

    def test_creation_order_is_kept(self) -> None:
        registry = PageRegistry()
        for path in ("/b", "/a", "/c"):
            registry.create_page(make_page(path))

        assert [page.path for page in registry] == ["/b", "/a", "/c"]

    def test_replacing_moves_page_to_end(self) -> None:
        registry = PageRegistry()
        registry.create_page(make_page("/a", version=1))
        registry.create_page(make_page("/b"))
        registry.create_page(make_page("/a", version=2))

        assert [page.path for page in registry.pages] == ["/b", "/a"]
        page = registry.get("/a")
        assert page is not None
        assert page.context["version"] == 2

    def test_delete_page(self) -> None:
        registry = PageRegistry()
        page = make_page("/about")
        registry.create_page(page)

        registry.delete_page(page)

        assert "/about" not in registry
        assert len(registry) == 0

    def test_delete_unknown_page_is_ignored(self) -> None:
        registry = PageRegistry()

        registry.delete_page(make_page("/missing"))

        assert len(registry) == 0

    def test_listeners_notified_on_create(self) -> None:
        registry = PageRegistry()
        seen: list[str] = []
        registry.add_listener(lambda page: seen.append(page.path))

        registry.create_page(make_page("/a"))
        registry.create_page(make_page("/b"))

        assert seen == ["/a", "/b"]

    def test_iteration_is_a_snapshot(self) -> None:
        registry = PageRegistry()
        registry.create_page(make_page("/a"))

        for page in registry:
            registry.create_page(make_page(page.path + "/child"))

        assert len(registry) == 2
