"""Render a hierarchy forest into display-ready structures."""

from __future__ import annotations

from typing import Callable, Iterable

from doxtree.config import DOXTREE_EXPAND_DEPTH
from doxtree.exceptions import UnknownNodeReferenceError
from doxtree.schemas import NodeState, RenderedNode, RenderedTree, TreeNode
from doxtree.utils.logging_config import get_logger

logger = get_logger(__name__)

LinkResolver = Callable[[str], str]


def render(
    forest: Iterable[TreeNode],
    *,
    expand_depth: int | None = None,
    link_resolver: LinkResolver | None = None,
) -> RenderedTree:
    """Transform a forest into a :class:`RenderedTree`.

    Nodes shallower than ``expand_depth`` start expanded, the rest collapsed.
    The default of 1 opens the roots only.

    When ``link_resolver`` is given, every link passes through it. A link the
    resolver rejects with :class:`UnknownNodeReferenceError` is dropped: the
    node renders as plain text and the link is listed in
    ``unresolved_links``.
    """
    depth_limit = DOXTREE_EXPAND_DEPTH if expand_depth is None else expand_depth
    unresolved: list[str] = []
    counter = [0]

    def _render_node(node: TreeNode, depth: int) -> RenderedNode:
        counter[0] += 1
        link = node.link
        if link is not None and link_resolver is not None:
            try:
                link = link_resolver(link)
            except UnknownNodeReferenceError as exc:
                logger.warning(
                    "Rendering node without link",
                    extra={"label": node.label, "link": node.link, "error": str(exc)},
                )
                if node.link not in unresolved:
                    unresolved.append(node.link)
                link = None
        return RenderedNode(
            label=node.label,
            link=link,
            depth=depth,
            state=NodeState.EXPANDED if depth < depth_limit else NodeState.COLLAPSED,
            children=[_render_node(child, depth + 1) for child in node.children],
        )

    nodes = [_render_node(root, 0) for root in forest]
    return RenderedTree(nodes=nodes, node_count=counter[0], unresolved_links=unresolved)


def render_json(tree: RenderedTree, *, indent: int | None = 2) -> str:
    """Serialize a rendered tree to JSON."""
    return tree.model_dump_json(indent=indent)


def render_text(tree: RenderedTree) -> str:
    """Render the tree as plain text with box-drawing connectors."""
    lines: list[str] = []
    for node in tree.nodes:
        lines.append(_format_label(node))
        for i, child in enumerate(node.children):
            lines.extend(_render_subtree(child, "", i == len(node.children) - 1))
    return "\n".join(lines)


def _format_label(node: RenderedNode) -> str:
    if node.link is None:
        return node.label
    return f"{node.label} -> {node.link}"


def _render_subtree(node: RenderedNode, prefix: str, is_last: bool) -> list[str]:
    connector = "└── " if is_last else "├── "
    lines = [prefix + connector + _format_label(node)]
    extension = "    " if is_last else "│   "
    child_prefix = prefix + extension
    for i, child in enumerate(node.children):
        lines.extend(_render_subtree(child, child_prefix, i == len(node.children) - 1))
    return lines
