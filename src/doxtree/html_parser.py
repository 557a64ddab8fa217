"""Parse rendered hierarchy HTML back into a forest."""

from __future__ import annotations

from doxtree.exceptions import MalformedTreeError
from doxtree.html_utils import LABEL_CLASS, direct_child, find_tree_container
from doxtree.model import TreeModel
from doxtree.schemas import TreeNode

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def parse_rendered_html(html: str) -> TreeModel:
    """Rebuild a :class:`TreeModel` from :func:`render_html` output."""
    soup = BeautifulSoup(html, "html.parser")
    container = find_tree_container(soup)
    if container is None:
        raise MalformedTreeError("No doxtree container found in HTML")

    root_list = container if container.name == "ul" else direct_child(container, "ul")
    if root_list is None:
        return TreeModel()
    return TreeModel.from_nodes(_parse_list(root_list))


def _parse_list(items: Tag) -> list[TreeNode]:
    return [_parse_item(item) for item in items.find_all("li", recursive=False)]


def _parse_item(item: Tag) -> TreeNode:
    details = direct_child(item, "details")
    if details is None:
        label_host = item
        children: list[TreeNode] = []
    else:
        label_host = direct_child(details, "summary")
        if label_host is None:
            raise MalformedTreeError("Collapsible node without <summary>")
        child_list = direct_child(details, "ul")
        children = _parse_list(child_list) if child_list is not None else []

    label_tag = label_host.find(["a", "span"], class_=LABEL_CLASS, recursive=False)
    if label_tag is None:
        raise MalformedTreeError("List item without a label element")
    link = label_tag.get("href") if label_tag.name == "a" else None
    return TreeNode(label=label_tag.get_text(), link=link, children=tuple(children))
