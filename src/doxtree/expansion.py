"""Presentation-layer expand/collapse state for rendered trees."""

from __future__ import annotations

from typing import Iterator

from doxtree.exceptions import UnknownNodeReferenceError
from doxtree.schemas import NodeState, RenderedNode, RenderedTree

NodePath = tuple[int, ...]


class ExpansionState:
    """Track which rendered nodes are expanded.

    Nodes are addressed by path: the sibling index at each level, starting
    from the roots. ``(2, 0)`` is the first child of the third root. The
    rendered tree itself is never modified.
    """

    def __init__(self, tree: RenderedTree) -> None:
        self._tree = tree
        self._states: dict[NodePath, NodeState] = {
            path: node.state for path, node in _walk(tree.nodes, ())
        }

    def state_of(self, path: NodePath) -> NodeState:
        try:
            return self._states[tuple(path)]
        except KeyError:
            raise UnknownNodeReferenceError(f"No node at path {tuple(path)}") from None

    def toggle(self, path: NodePath) -> NodeState:
        """Flip one node between collapsed and expanded and return the new state."""
        current = self.state_of(path)
        new_state = NodeState.COLLAPSED if current is NodeState.EXPANDED else NodeState.EXPANDED
        self._states[tuple(path)] = new_state
        return new_state

    def expand_all(self) -> None:
        for path in self._states:
            self._states[path] = NodeState.EXPANDED

    def collapse_all(self) -> None:
        for path in self._states:
            self._states[path] = NodeState.COLLAPSED

    def visible_paths(self) -> list[NodePath]:
        """Paths of nodes whose ancestors are all expanded, in display order."""
        visible: list[NodePath] = []

        def _collect(nodes: list[RenderedNode], prefix: NodePath) -> None:
            for index, node in enumerate(nodes):
                path = prefix + (index,)
                visible.append(path)
                if self._states[path] is NodeState.EXPANDED:
                    _collect(node.children, path)

        _collect(self._tree.nodes, ())
        return visible

    def node_at(self, path: NodePath) -> RenderedNode:
        nodes = self._tree.nodes
        node: RenderedNode | None = None
        for index in path:
            if index < 0 or index >= len(nodes):
                raise UnknownNodeReferenceError(f"No node at path {tuple(path)}")
            node = nodes[index]
            nodes = node.children
        if node is None:
            raise UnknownNodeReferenceError("Empty node path")
        return node


def _walk(nodes: list[RenderedNode], prefix: NodePath) -> Iterator[tuple[NodePath, RenderedNode]]:
    for index, node in enumerate(nodes):
        path = prefix + (index,)
        yield path, node
        yield from _walk(node.children, path)
