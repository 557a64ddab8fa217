"""Format rendered hierarchies into summary, text tree and HTML outputs."""

from __future__ import annotations

from doxtree.html_renderer import DEFAULT_PAGE_TITLE, render_page
from doxtree.model import TreeModel
from doxtree.renderer import render_text
from doxtree.schemas import HierarchyDocument, RenderedTree


def format_hierarchy(
    forest: TreeModel,
    tree: RenderedTree,
    *,
    title: str = DEFAULT_PAGE_TITLE,
    source: str | None = None,
) -> HierarchyDocument:
    """Create summary, text tree, and HTML page."""
    tree_text = "Hierarchy:\n" + render_text(tree) if tree.nodes else "Hierarchy:\n(empty)"

    summary_lines = [f"Title: {title}"]
    if source:
        summary_lines.append(f"Source: {source}")
    summary_lines.append(f"Roots: {len(forest)}")
    summary_lines.append(f"Nodes: {tree.node_count}")
    summary_lines.append(f"Max depth: {forest.max_depth()}")
    if tree.unresolved_links:
        summary_lines.append(f"Unresolved links: {len(tree.unresolved_links)}")

    return HierarchyDocument(
        summary="\n".join(summary_lines),
        tree_text=tree_text,
        html=render_page(tree, title=title),
    )
