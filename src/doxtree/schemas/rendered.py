"""Rendered tree models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class NodeState(str, Enum):
    """Expand/collapse state of a rendered node."""

    COLLAPSED = "collapsed"
    EXPANDED = "expanded"


class RenderedNode(BaseModel):
    """A node ready for display.

    Attributes:
        label: Display name.
        link: Target of the clickable reference, or None for plain text.
        depth: Zero-based nesting level; roots are at depth 0.
        state: Initial expand/collapse state.
        children: Rendered children in source order.
    """

    label: str
    link: str | None = None
    depth: int = Field(..., ge=0)
    state: NodeState = NodeState.COLLAPSED
    children: list["RenderedNode"] = Field(default_factory=list)


class RenderedTree(BaseModel):
    """Output of the renderer."""

    nodes: list[RenderedNode] = Field(default_factory=list)
    node_count: int = 0
    unresolved_links: list[str] = Field(default_factory=list)
