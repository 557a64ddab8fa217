"""Shared HTML helpers for rendered hierarchy documents."""

from __future__ import annotations

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc


CONTAINER_CLASS = "doxtree"
LABEL_CLASS = "el"


def find_tree_container(soup: BeautifulSoup) -> Tag | None:
    """Find the element holding a rendered hierarchy.

    Searches for ``<div class="doxtree">`` first and falls back to the first
    ``<ul>`` carrying the same class.
    """
    container = soup.find("div", class_=CONTAINER_CLASS)
    if container:
        return container
    return soup.find("ul", class_=CONTAINER_CLASS)


def direct_child(tag: Tag, name: str | list[str]) -> Tag | None:
    """Return the first direct child element matching ``name``."""
    return tag.find(name, recursive=False)
