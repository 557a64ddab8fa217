"""Immutable forest of hierarchy nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence

from doxtree.exceptions import MalformedTreeError
from doxtree.schemas import TreeNode

_TUPLE_SIZE = 3


@dataclass(frozen=True)
class TreeModel(Sequence[TreeNode]):
    """Ordered, read-only sequence of root nodes.

    Build it with :meth:`from_raw` for the ``[label, link, children]`` array
    encoding, or :meth:`from_nodes` for nodes constructed in code. Both reject
    any node that is its own ancestor.
    """

    roots: tuple[TreeNode, ...] = ()

    @classmethod
    def from_raw(cls, data: Any) -> TreeModel:
        """Build a forest from nested ``[label, link-or-null, children]`` arrays.

        Raises:
            MalformedTreeError: If the data is not a list of well-formed
                tuples, or if an array contains itself.
        """
        if not isinstance(data, (list, tuple)):
            raise MalformedTreeError(
                f"Hierarchy must be an array, got {type(data).__name__}"
            )
        return cls(roots=tuple(_node_from_raw(entry, (), (index,)) for index, entry in enumerate(data)))

    @classmethod
    def from_nodes(cls, nodes: Iterable[TreeNode]) -> TreeModel:
        """Wrap existing nodes, checking that none is its own ancestor."""
        roots = tuple(nodes)
        for index, node in enumerate(roots):
            _check_acyclic(node, (), (index,))
        return cls(roots=roots)

    def __len__(self) -> int:
        return len(self.roots)

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self.roots)

    def __getitem__(self, index):  # type: ignore[override]
        return self.roots[index]

    def iter_nodes(self) -> Iterator[tuple[int, TreeNode]]:
        """Yield ``(depth, node)`` pairs in depth-first pre-order."""
        stack: list[tuple[int, TreeNode]] = [(0, node) for node in reversed(self.roots)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            stack.extend((depth + 1, child) for child in reversed(node.children))

    def count_nodes(self) -> int:
        """Count every node occurrence in the forest."""
        return sum(1 for _ in self.iter_nodes())

    def labels(self) -> list[str]:
        """Labels in pre-order, duplicates included."""
        return [node.label for _, node in self.iter_nodes()]

    def max_depth(self) -> int:
        """Number of levels; 0 for an empty forest, 1 when only roots exist."""
        return max((depth + 1 for depth, _ in self.iter_nodes()), default=0)

    def to_raw(self) -> list[list[Any]]:
        """Return the array encoding, with ``None`` children for leaves."""
        return [_node_to_raw(node) for node in self.roots]


def _node_from_raw(entry: Any, ancestors: tuple[int, ...], path: tuple[int, ...]) -> TreeNode:
    if id(entry) in ancestors:
        raise MalformedTreeError(f"Cycle detected at {_format_path(path)}")
    if not isinstance(entry, (list, tuple)) or len(entry) != _TUPLE_SIZE:
        raise MalformedTreeError(
            f"Node at {_format_path(path)} must be a [label, link, children] array"
        )

    label, link, children = entry
    if not isinstance(label, str):
        raise MalformedTreeError(f"Label at {_format_path(path)} must be a string")
    if link is not None and not isinstance(link, str):
        raise MalformedTreeError(f"Link at {_format_path(path)} must be a string or null")
    if children is None:
        children = ()
    elif not isinstance(children, (list, tuple)):
        raise MalformedTreeError(
            f"Children at {_format_path(path)} must be an array or null, "
            f"got {type(children).__name__}"
        )
    elif id(children) in ancestors:
        raise MalformedTreeError(f"Cycle detected at {_format_path(path)}")

    lineage = ancestors + (id(entry), id(children))
    return TreeNode(
        label=label,
        link=link,
        children=tuple(
            _node_from_raw(child, lineage, path + (index,))
            for index, child in enumerate(children)
        ),
    )


def _check_acyclic(node: TreeNode, ancestors: tuple[int, ...], path: tuple[int, ...]) -> None:
    if id(node) in ancestors:
        raise MalformedTreeError(f"Node {node.label!r} at {_format_path(path)} is its own ancestor")
    lineage = ancestors + (id(node),)
    for index, child in enumerate(node.children):
        if not isinstance(child, TreeNode):
            raise MalformedTreeError(f"Child at {_format_path(path + (index,))} is not a TreeNode")
        _check_acyclic(child, lineage, path + (index,))


def _node_to_raw(node: TreeNode) -> list[Any]:
    children = [_node_to_raw(child) for child in node.children] or None
    return [node.label, node.link, children]


def _format_path(path: tuple[int, ...]) -> str:
    return "/".join(str(index) for index in path)
