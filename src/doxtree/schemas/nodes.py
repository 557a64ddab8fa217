"""Hierarchy node model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TreeNode(BaseModel):
    """A labeled hierarchy entry with an optional link and ordered children.

    A node is one occurrence in the hierarchy. The same class may appear as
    several independent nodes under different parents.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    link: str | None = None
    children: tuple["TreeNode", ...] = Field(default_factory=tuple)

    @property
    def is_linkable(self) -> bool:
        return self.link is not None

    @property
    def is_leaf(self) -> bool:
        return not self.children
