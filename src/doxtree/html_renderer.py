"""Serialize rendered trees to DOM-like HTML."""

from __future__ import annotations

from doxtree.html_utils import CONTAINER_CLASS, LABEL_CLASS
from doxtree.schemas import NodeState, RenderedNode, RenderedTree

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc


DEFAULT_PAGE_TITLE = "Class Hierarchy"
_INTRO_TEXT = "This inheritance list is sorted roughly, but not completely, alphabetically:"


def render_html(tree: RenderedTree) -> str:
    """Render a tree as a ``<div class="doxtree">`` fragment.

    Leaves are plain ``<li>`` items. Nodes with children wrap them in
    ``<details>``/``<summary>``; expanded nodes carry the ``open`` attribute.
    """
    soup = BeautifulSoup("", "html.parser")
    soup.append(_build_container(soup, tree))
    return str(soup)


def render_page(tree: RenderedTree, *, title: str = DEFAULT_PAGE_TITLE) -> str:
    """Render a standalone HTML page around the tree fragment."""
    soup = BeautifulSoup(
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\"/><title></title></head>"
        "<body></body></html>",
        "html.parser",
    )
    soup.title.string = title
    heading = soup.new_tag("h1")
    heading.string = title
    intro = soup.new_tag("p", attrs={"class": "intro"})
    intro.string = _INTRO_TEXT
    soup.body.append(heading)
    soup.body.append(intro)
    soup.body.append(_build_container(soup, tree))
    return str(soup)


def _build_container(soup: BeautifulSoup, tree: RenderedTree) -> Tag:
    container = soup.new_tag("div", attrs={"class": CONTAINER_CLASS})
    container.append(_build_list(soup, tree.nodes))
    return container


def _build_list(soup: BeautifulSoup, nodes: list[RenderedNode]) -> Tag:
    items = soup.new_tag("ul")
    for node in nodes:
        items.append(_build_item(soup, node))
    return items


def _build_item(soup: BeautifulSoup, node: RenderedNode) -> Tag:
    item = soup.new_tag("li", attrs={"data-depth": str(node.depth)})
    label = _build_label(soup, node)
    if not node.children:
        item.append(label)
        return item

    details = soup.new_tag("details")
    if node.state is NodeState.EXPANDED:
        details["open"] = ""
    summary = soup.new_tag("summary")
    summary.append(label)
    details.append(summary)
    details.append(_build_list(soup, node.children))
    item.append(details)
    return item


def _build_label(soup: BeautifulSoup, node: RenderedNode) -> Tag:
    if node.link is not None:
        label = soup.new_tag("a", attrs={"class": LABEL_CLASS, "href": node.link})
    else:
        label = soup.new_tag("span", attrs={"class": LABEL_CLASS})
    label.string = node.label
    return label
