"""Tests for link resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from doxtree.exceptions import UnknownNodeReferenceError
from doxtree.links import (
    DirectoryLinkResolver,
    SetLinkResolver,
    find_unresolved_links,
    strip_fragment,
)
from doxtree.model import TreeModel


class TestStripFragment:
    """Tests for strip_fragment."""

    @pytest.mark.parametrize(
        ("link", "expected"),
        [
            ("class_foo.html", "class_foo.html"),
            ("class_foo.html#a1b2", "class_foo.html"),
            ("search.html?q=x#top", "search.html"),
            ("#anchor", ""),
        ],
    )
    def test_strips(self, link: str, expected: str) -> None:
        assert strip_fragment(link) == expected


class TestDirectoryLinkResolver:
    """Tests for DirectoryLinkResolver."""

    def test_resolves_existing_file(self, tmp_path: Path) -> None:
        (tmp_path / "class_foo.html").write_text("<html></html>")
        resolver = DirectoryLinkResolver(tmp_path)

        assert resolver("class_foo.html#details") == "class_foo.html#details"

    def test_missing_file(self, tmp_path: Path) -> None:
        resolver = DirectoryLinkResolver(tmp_path)

        with pytest.raises(UnknownNodeReferenceError, match="not found"):
            resolver("class_missing.html")

    def test_rejects_escape(self, tmp_path: Path) -> None:
        docs = tmp_path / "html"
        docs.mkdir()
        (tmp_path / "secret.html").write_text("x")

        with pytest.raises(UnknownNodeReferenceError, match="outside"):
            DirectoryLinkResolver(docs)("../secret.html")

    def test_absolute_urls_pass_through(self, tmp_path: Path) -> None:
        resolver = DirectoryLinkResolver(tmp_path)

        assert resolver("https://example.com/class_a.html") == "https://example.com/class_a.html"

    def test_same_page_anchor(self, tmp_path: Path) -> None:
        assert DirectoryLinkResolver(tmp_path)("#top") == "#top"


class TestSetLinkResolver:
    """Tests for SetLinkResolver."""

    def test_known_and_unknown(self) -> None:
        resolver = SetLinkResolver(["a.html", "b.html#x"])

        assert resolver("a.html#member") == "a.html#member"
        assert resolver("b.html") == "b.html"
        with pytest.raises(UnknownNodeReferenceError):
            resolver("c.html")


class TestFindUnresolvedLinks:
    """Tests for find_unresolved_links."""

    def test_lists_unique_failures_in_order(self) -> None:
        forest = TreeModel.from_raw(
            [
                ["A", "a.html", [["X", "x.html", None]]],
                ["B", "b.html", [["X", "x.html", None], ["G", None, None]]],
            ]
        )

        unresolved = find_unresolved_links(forest, SetLinkResolver(["a.html"]))

        assert unresolved == ["x.html", "b.html"]

    def test_doxygen_fixture_against_directory(self, hierarchy_js_path: Path, tmp_path: Path) -> None:
        from doxtree.js_parser import parse_hierarchy_js

        forest = TreeModel.from_raw(parse_hierarchy_js(hierarchy_js_path.read_text()))
        (tmp_path / "class_foo.html").write_text("")
        (tmp_path / "class_data_flash.html").write_text("")

        unresolved = find_unresolved_links(forest, DirectoryLinkResolver(tmp_path))

        assert "class_foo.html" not in unresolved
        assert "class_data_flash.html" not in unresolved
        assert "class_lonely_test.html" in unresolved
        assert len(unresolved) == len(set(unresolved))
