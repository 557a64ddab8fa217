"""Tests for HTML rendering and parsing."""

from __future__ import annotations

from typing import Any

import pytest
from bs4 import BeautifulSoup

from doxtree.exceptions import MalformedTreeError
from doxtree.html_parser import parse_rendered_html
from doxtree.html_renderer import render_html, render_page
from doxtree.js_parser import parse_hierarchy_js
from doxtree.model import TreeModel
from doxtree.renderer import render
from doxtree.schemas import RenderedTree


class TestRenderHtml:
    """Tests for render_html."""

    def test_linked_and_plain_labels(self) -> None:
        tree = render(TreeModel.from_raw([["A", "a.html", [["B", None, []]]]]))

        soup = BeautifulSoup(render_html(tree), "html.parser")

        container = soup.find("div", class_="doxtree")
        assert container is not None
        root_item = container.ul.find("li", recursive=False)
        details = root_item.find("details", recursive=False)
        assert details.has_attr("open")
        anchor = details.summary.find("a")
        assert anchor["href"] == "a.html"
        assert anchor.get_text() == "A"
        child_item = details.ul.find("li", recursive=False)
        assert child_item.find("a") is None
        assert child_item.find("span", class_="el").get_text() == "B"

    def test_collapsed_nodes_are_not_open(self, sample_raw: list[Any]) -> None:
        tree = render(TreeModel.from_raw(sample_raw))

        soup = BeautifulSoup(render_html(tree), "html.parser")

        states = {
            details.summary.get_text(): details.has_attr("open")
            for details in soup.find_all("details")
        }
        assert states == {"Base": True, "Left": False, "Right": False, "Interface": True}

    def test_leaves_have_no_details(self) -> None:
        tree = render(TreeModel.from_raw([["Foo", "class_foo.html", None]]))

        soup = BeautifulSoup(render_html(tree), "html.parser")

        assert soup.find("details") is None
        assert soup.find("li").find("a")["href"] == "class_foo.html"

    def test_escapes_labels_and_links(self) -> None:
        tree = render(
            TreeModel.from_raw([["Dummy::TestNotification< T >", "a.html?x=1&y=<2>", None]])
        )

        html = render_html(tree)

        assert "< T >" not in html
        assert "&lt; T &gt;" in html
        assert "&amp;" in html

    def test_empty_tree(self) -> None:
        html = render_html(RenderedTree())

        assert html == '<div class="doxtree"><ul></ul></div>'

    def test_depth_attribute(self, sample_raw: list[Any]) -> None:
        soup = BeautifulSoup(render_html(render(TreeModel.from_raw(sample_raw))), "html.parser")

        depths = [item["data-depth"] for item in soup.find_all("li")]
        assert depths == ["0", "1", "2", "1", "2", "0", "1", "0"]


class TestRenderPage:
    """Tests for render_page."""

    def test_wraps_fragment(self, sample_raw: list[Any]) -> None:
        page = render_page(render(TreeModel.from_raw(sample_raw)), title="Class Hierarchy")

        soup = BeautifulSoup(page, "html.parser")
        assert page.startswith("<!DOCTYPE html>")
        assert soup.title.get_text() == "Class Hierarchy"
        assert soup.h1.get_text() == "Class Hierarchy"
        assert "sorted roughly" in soup.find("p", class_="intro").get_text()
        assert soup.body.find("div", class_="doxtree") is not None


class TestParseRenderedHtml:
    """Tests for parse_rendered_html."""

    def test_reads_fragment(self) -> None:
        forest = TreeModel.from_raw([["A", "a.html", [["B", None, []]]]])

        parsed = parse_rendered_html(render_html(render(forest)))

        assert parsed == forest

    def test_reads_page(self, sample_raw: list[Any]) -> None:
        forest = TreeModel.from_raw(sample_raw)

        parsed = parse_rendered_html(render_page(render(forest)))

        assert parsed == forest

    def test_round_trip_is_idempotent(self, hierarchy_js: str) -> None:
        forest = TreeModel.from_raw(parse_hierarchy_js(hierarchy_js))
        rendered = render(forest)

        reparsed = parse_rendered_html(render_html(rendered))

        assert render(reparsed) == rendered

    @pytest.mark.parametrize("expand_depth", [0, 1, 3])
    def test_round_trip_with_expand_depth(self, sample_raw: list[Any], expand_depth: int) -> None:
        rendered = render(TreeModel.from_raw(sample_raw), expand_depth=expand_depth)

        reparsed = parse_rendered_html(render_html(rendered))

        assert render(reparsed, expand_depth=expand_depth) == rendered

    def test_empty_tree(self) -> None:
        assert len(parse_rendered_html(render_html(RenderedTree()))) == 0

    def test_missing_container(self) -> None:
        with pytest.raises(MalformedTreeError, match="No doxtree container"):
            parse_rendered_html("<html><body><ul><li>A</li></ul></body></html>")

    def test_item_without_label(self) -> None:
        with pytest.raises(MalformedTreeError, match="without a label"):
            parse_rendered_html('<div class="doxtree"><ul><li>plain</li></ul></div>')
