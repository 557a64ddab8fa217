"""Link resolution against generated documentation."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Iterable

from doxtree.exceptions import UnknownNodeReferenceError
from doxtree.model import TreeModel

_ABSOLUTE_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


def strip_fragment(link: str) -> str:
    """Drop any ``#anchor`` and ``?query`` suffix from a link."""
    return re.split(r"[#?]", link, maxsplit=1)[0]


class DirectoryLinkResolver:
    """Resolve relative links against a documentation directory.

    Absolute URLs are returned untouched. A relative link resolves when the
    file it names exists under ``base_dir`` and does not escape it.
    """

    def __init__(self, base_dir: Path | str) -> None:
        self.base_dir = Path(base_dir).expanduser().resolve()

    def __call__(self, link: str) -> str:
        if _ABSOLUTE_URL_RE.match(link):
            return link
        target_name = strip_fragment(link)
        if not target_name:
            # Same-page anchor.
            return link
        target = (self.base_dir / target_name).resolve()
        if not target.is_relative_to(self.base_dir):
            raise UnknownNodeReferenceError(f"Link {link!r} points outside {self.base_dir}")
        if not target.is_file():
            raise UnknownNodeReferenceError(f"Link target {target_name!r} not found in {self.base_dir}")
        return link


class SetLinkResolver:
    """Resolve links against a fixed set of known targets."""

    def __init__(self, known: Iterable[str]) -> None:
        self.known = frozenset(strip_fragment(item) for item in known)

    def __call__(self, link: str) -> str:
        if strip_fragment(link) not in self.known:
            raise UnknownNodeReferenceError(f"Unknown link target {link!r}")
        return link


def find_unresolved_links(forest: TreeModel, resolver: Callable[[str], str]) -> list[str]:
    """Return links the resolver rejects, in pre-order and without duplicates."""
    unresolved: list[str] = []
    for _, node in forest.iter_nodes():
        if node.link is None or node.link in unresolved:
            continue
        try:
            resolver(node.link)
        except UnknownNodeReferenceError:
            unresolved.append(node.link)
    return unresolved
