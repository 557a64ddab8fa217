"""Shared schemas for doxtree."""

from doxtree.schemas.document import HierarchyDocument
from doxtree.schemas.nodes import TreeNode
from doxtree.schemas.rendered import NodeState, RenderedNode, RenderedTree

__all__ = ["HierarchyDocument", "NodeState", "RenderedNode", "RenderedTree", "TreeNode"]
